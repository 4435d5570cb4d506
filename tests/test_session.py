# tests/test_session.py
from analysis.session import find_invalid_sessions
from tests.helpers import make_event


def test_login_while_open_and_out_of_order_logout():
    events = [
        make_event(1, session="S1", action="LOGIN"),
        make_event(2, session="S2", action="LOGIN"),
        make_event(3, session="S1", action="LOGOUT"),
    ]
    # S2 opened over S1; S1 closed while S2 is on top; both stay open at the end
    assert find_invalid_sessions(events) == {"S1", "S2"}


def test_alternating_login_logout_is_clean():
    events = []
    for i, sid in enumerate(["a", "b", "c"]):
        events.append(make_event(i * 10, user="u1", session=sid, action="LOGIN"))
        events.append(make_event(i * 10 + 1, user="u2", session=sid + "2", action="login"))
        events.append(make_event(i * 10 + 5, user="u1", session=sid, action="VIEW"))
        events.append(make_event(i * 10 + 6, user="u1", session=sid, action="Logout"))
        events.append(make_event(i * 10 + 7, user="u2", session=sid + "2", action="LOGOUT"))
    assert find_invalid_sessions(events) == set()


def test_logout_without_login():
    assert find_invalid_sessions([make_event(1, session="S9", action="LOGOUT")]) == {"S9"}


def test_session_never_closed():
    events = [
        make_event(1, session="S1", action="LOGIN"),
        make_event(2, session="S1", action="DOWNLOAD"),
    ]
    assert find_invalid_sessions(events) == {"S1"}


def test_nested_login_flagged_even_when_closed_later():
    events = [
        make_event(1, session="S1", action="LOGIN"),
        make_event(2, session="S2", action="LOGIN"),
        make_event(3, session="S2", action="LOGOUT"),
        make_event(4, session="S1", action="LOGOUT"),
    ]
    assert find_invalid_sessions(events) == {"S2"}


def test_events_are_ordered_by_timestamp_first():
    events = [
        make_event(9, session="S1", action="LOGOUT"),
        make_event(1, session="S1", action="LOGIN"),
    ]
    assert find_invalid_sessions(events) == set()


def test_events_missing_identity_are_ignored():
    events = [
        make_event(1, session="S1", action="LOGIN"),
        make_event(2, user="", session="S2", action="LOGIN"),
        make_event(3, session="", action="LOGIN"),
        make_event(4, session="S3", action=""),
        make_event(5, session="S1", action="LOGOUT"),
    ]
    assert find_invalid_sessions(events) == set()


def test_users_have_independent_stacks():
    events = [
        make_event(1, user="alice", session="A", action="LOGIN"),
        make_event(2, user="bob", session="B", action="LOGIN"),
        make_event(3, user="alice", session="A", action="LOGOUT"),
        make_event(4, user="bob", session="B", action="LOGOUT"),
    ]
    assert find_invalid_sessions(events) == set()


def test_flagged_ids_come_from_login_or_logout_events():
    events = [
        make_event(1, session="S1", action="LOGIN"),
        make_event(2, session="S2", action="VIEW"),
        make_event(3, session="S3", action="LOGIN"),
        make_event(4, session="S4", action="LOGOUT"),
    ]
    session_events = {e.session_id for e in events if e.action_type in ("LOGIN", "LOGOUT")}
    invalid = find_invalid_sessions(events)
    assert invalid <= session_events
    assert invalid == {"S1", "S3", "S4"}
