from leavedesk.db.init_db import DEFAULT_USERS, seed_database
from leavedesk.models.user import User, UserRole
from leavedesk.services.auth import Authenticator


class TestSeed:
    """First-run seeding"""

    def test_seed_empty_store(self, session_factory):
        assert seed_database(session_factory) == len(DEFAULT_USERS)
        with session_factory() as db:
            roles = {u.username: u.role for u in db.query(User).all()}
        assert roles == {"admin": UserRole.ADMIN, "john.doe": UserRole.EMPLOYEE}

    def test_seed_is_idempotent(self, session_factory):
        seed_database(session_factory)
        assert seed_database(session_factory) == 0
        with session_factory() as db:
            assert db.query(User).count() == 2

    def test_seed_skipped_when_users_exist(self, session_factory, employee_user):
        assert seed_database(session_factory) == 0

    def test_seeded_accounts_can_log_in(self, session_factory):
        seed_database(session_factory)
        authenticator = Authenticator(session_factory)
        assert authenticator.login("admin", "admin123").role == UserRole.ADMIN
        assert authenticator.login("John.Doe", "password123").name == "John Doe"
