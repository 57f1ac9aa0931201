"""SessionManager 및 실행 ID 생성기 테스트."""

from concurrent.futures import ThreadPoolExecutor
from unittest.mock import patch

import pytest

from safebites.runtime.session_manager import (
    SESSION_ID_PREFIX,
    USER_ID_PREFIX,
    RunIdGenerator,
    SessionManager,
    get_run_id_generator,
)
from safebites.utils.errors import SessionCreationError


@pytest.fixture
def session_manager():
    return SessionManager(run_ids=RunIdGenerator())


class TestRunIdGenerator:
    def test_ids_are_unique_across_threads(self):
        generator = RunIdGenerator()

        with ThreadPoolExecutor(max_workers=8) as pool:
            ids = list(pool.map(lambda _: generator.next_id(), range(500)))

        assert len(set(ids)) == 500

    def test_sequence_suffix_increases(self):
        generator = RunIdGenerator()

        first = generator.next_id()
        second = generator.next_id()

        assert first.endswith("-1")
        assert second.endswith("-2")

    def test_global_generator(self):
        assert get_run_id_generator() is get_run_id_generator()


class TestSessionManager:
    def test_create_session(self, session_manager):
        session_id = session_manager.create_session("safebites-search")

        session = session_manager.get_session(session_id)
        assert session_id.startswith(SESSION_ID_PREFIX)
        assert session.user_id.startswith(USER_ID_PREFIX)
        assert session.app_name == "safebites-search"
        assert session_manager.get_thread(session_id) is not None

    def test_session_and_user_share_run_id(self, session_manager):
        session_id = session_manager.create_session("safebites-scorer")
        session = session_manager.get_session(session_id)

        assert session_id[len(SESSION_ID_PREFIX):] == session.user_id[len(USER_ID_PREFIX):]

    def test_sessions_are_distinct(self, session_manager):
        first = session_manager.create_session("safebites-search")
        second = session_manager.create_session("safebites-search")

        assert first != second
        assert session_manager.get_session_count() == 2

    @pytest.mark.parametrize("app_name", ["", "   "])
    def test_blank_app_name_rejected(self, session_manager, app_name):
        with pytest.raises(SessionCreationError):
            session_manager.create_session(app_name)
        assert session_manager.get_session_count() == 0

    def test_thread_failure_wrapped(self, session_manager):
        with patch(
            "safebites.runtime.session_manager.AgentThread",
            side_effect=RuntimeError("store unavailable"),
        ):
            with pytest.raises(SessionCreationError, match="store unavailable"):
                session_manager.create_session("safebites-search")

    def test_delete_session(self, session_manager):
        session_id = session_manager.create_session("safebites-search")

        session_manager.delete_session(session_id)

        assert session_manager.get_session(session_id) is None
        assert session_manager.get_thread(session_id) is None
        assert session_manager.get_session_count() == 0

    def test_delete_unknown_session_is_noop(self, session_manager):
        session_manager.delete_session("safebites-session-missing")
        assert session_manager.get_session_count() == 0

    def test_session_serializes_created_at(self, session_manager):
        session_id = session_manager.create_session("safebites-search")

        dumped = session_manager.get_session(session_id).model_dump()

        assert isinstance(dumped["created_at"], str)
