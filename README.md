# tokenqueue

`tokenqueue` hands out numbered tokens at a service counter. It keeps track of
how many people are waiting and estimates how long each new arrival will wait.
Only a fixed number of tokens can be live at once. When the counter is full,
the machine returns an apology instead of a token.

## Installation

```
pip install .
```

## Command line

```
tokenqueue
```

This command runs a fixed demonstration session with a default machine. The
default machine allows 5 live tokens and assumes 3 minutes per person. During
the session, tokens are issued and people are serviced. Each token message, or
the apology when the counter is full, is printed as it is produced. Partway
through, the session prints the line `Count of Persons Serviced: ` followed by
that count. The command takes no options apart from `--help`.

## Library use

```python
from tokenqueue.machine import TokenMachine

machine = TokenMachine(max_live_tokens=5, average_processing_time=3)

print(machine.next_token())
# Token Id:  1
# Person before you in Line are: 0
# Expected Waiting Time: 0 minutes

machine.person_serviced()
print(machine.active_count())    # people still waiting
print(machine.serviced_count())  # tokens issued minus people still waiting
machine.reset()                  # token numbering starts again from zero
```

Numbers in the token messages are written with a sign column: a space before a
positive number, and `-` before a negative one. That is why the message reads
`Token Id:  1` with two spaces.

The expected waiting time is `average_processing_time` multiplied by the number
of people already waiting, truncated to a whole number. If `max_live_tokens`
people are already waiting, `next_token()` issues no token. It returns a message
saying that the limit has been reached. A token becomes available again after
`person_serviced()` is called. `person_serviced()` does nothing when nobody is
waiting. A negative `max_live_tokens` raises `ValueError`.

### MutableString

`tokenqueue.text.MutableString` is the editable text type the machine uses to
write its numbers. Along with its text, it tracks a capacity. The capacity is
`len(text) + 1` for non-empty text and 0 for empty text. It offers:

- In-place editing: `insert`, `remove`, `replace` (returns the number of
  replacements), `reverse`, `make_upper`, `make_lower`, `trim`, `trim_left`,
  `trim_right`.
- Splitting: `left` and `right`. Each moves text out of the buffer and returns
  it as a new `MutableString`.
- Numbers: `set_number`, `to_int`, `to_float`.
- Comparison and search: `compare` (returns -1, 0 or 1) and `find` (returns -1
  when the text is absent).
- Capacity: `size`, `resize`, `shrink`.
- Input: `read_line(stream)`, which replaces the contents with one line read
  from a text stream.
- Operators: `str()`, `len()`, item access and assignment, `+` and `+=`.
  Item access outside the capacity raises `IndexError`.

```python
from tokenqueue.text import MutableString

s = MutableString("hello world")
s.make_upper()
print(s)                   # HELLO WORLD
print(s.find("WORLD", 0))  # 6
```

## What it does not do

The machine keeps its counts in memory only. Nothing is saved between runs. The
command line offers no interactive way to issue tokens or mark people as
serviced; it only plays back its fixed demonstration session.

## Running the tests

```
pip install .[test]
pytest
```