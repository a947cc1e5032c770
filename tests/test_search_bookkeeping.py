from streamlit.testing.v1 import AppTest

from common.ui import finish_search, search_in_flight, submit_search, take_pending_search

PREFIX = "teams_search"


def test_submit_marks_search_in_flight():
    state = {}
    token = submit_search(PREFIX, "Arsenal", state)
    assert search_in_flight(PREFIX, state)
    assert state[f"{PREFIX}_pending"] == (token, "Arsenal")


def test_finish_clears_flag_for_latest_search():
    state = {}
    submit_search(PREFIX, "Arsenal", state)
    token, query = take_pending_search(PREFIX, state)
    assert query == "Arsenal"
    assert finish_search(PREFIX, token, state) is True
    assert not search_in_flight(PREFIX, state)
    assert take_pending_search(PREFIX, state) is None


def test_result_for_older_token_is_discarded():
    state = {}
    old = submit_search(PREFIX, "Arsenal", state)
    new = submit_search(PREFIX, "Barcelona", state)
    assert new > old
    assert finish_search(PREFIX, old, state) is False
    assert finish_search(PREFIX, new, state) is True


def test_prefixes_do_not_share_state():
    state = {}
    submit_search(PREFIX, "Arsenal", state)
    assert not search_in_flight("api_search", state)


def test_taken_but_unfinished_search_does_not_block_next_run():
    state = {}
    submit_search(PREFIX, "Arsenal", state)
    take_pending_search(PREFIX, state)
    # the run stopped here without reaching finish_search
    assert not search_in_flight(PREFIX, state)
    assert state[f"{PREFIX}_in_flight"] is False


def _interrupted_search_app():
    import streamlit as st

    from common.ui import search_in_flight, submit_search, take_pending_search

    run = st.session_state.get("run", 0) + 1
    st.session_state["run"] = run
    if run == 1:
        submit_search("p", "Arsenal")
    elif run == 2:
        take_pending_search("p")
        st.stop()
    st.session_state["busy"] = search_in_flight("p")


def test_stopped_run_leaves_search_form_enabled():
    at = AppTest.from_function(_interrupted_search_app)
    at.run()
    assert at.session_state["busy"] is True
    at.run()
    at.run()
    assert at.session_state["busy"] is False
    assert not at.exception
