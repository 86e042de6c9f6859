import pytest

from tokenqueue.machine import TokenMachine


def test_first_token_message():
    machine = TokenMachine()
    assert machine.next_token() == (
        "Token Id:  1\nPerson before you in Line are: 0\n"
        "Expected Waiting Time: 0 minutes"
    )
    assert machine.active_count() == 1


def test_second_token_waits_one_processing_time():
    machine = TokenMachine()
    machine.next_token()
    message = machine.next_token()
    assert message.startswith("Token Id: ")
    assert message.endswith(" 3 minutes")


def test_limit_reached_refuses_tokens():
    machine = TokenMachine(max_live_tokens=2)
    machine.next_token()
    machine.next_token()
    refusal = machine.next_token()
    assert refusal.startswith("We are sorry.")
    assert " 2 tokens in system" in refusal
    assert machine.active_count() == 2


def test_person_serviced_never_goes_negative():
    machine = TokenMachine()
    machine.person_serviced()
    assert machine.active_count() == 0
    machine.next_token()
    machine.person_serviced()
    machine.person_serviced()
    assert machine.active_count() == 0


def test_serviced_count_is_issued_minus_active():
    machine = TokenMachine()
    for _ in range(4):
        machine.next_token()
    machine.person_serviced()
    assert machine.serviced_count() == 4 - machine.active_count()


def test_refused_tokens_do_not_count_as_issued():
    machine = TokenMachine(max_live_tokens=1)
    machine.next_token()
    machine.next_token()
    machine.person_serviced()
    assert machine.serviced_count() == 1


def test_reset_restarts_numbering():
    machine = TokenMachine()
    first = machine.next_token()
    machine.next_token()
    machine.reset()
    assert machine.active_count() == 0
    assert machine.serviced_count() == 0
    assert machine.next_token() == first


def test_negative_limit_rejected():
    with pytest.raises(ValueError):
        TokenMachine(max_live_tokens=-1)