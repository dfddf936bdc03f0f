from pvz.models import User
from pvz.services import pvz_service


class TestPvzCommands:

    def test_create_and_list(self, app, db_session):
        runner = app.test_cli_runner()

        result = runner.invoke(args=["pvz", "create", "--city", "Казань"])
        assert result.exit_code == 0
        assert "PASS Created pvz" in result.output

        result = runner.invoke(args=["pvz", "list"])
        assert result.exit_code == 0
        assert "Казань" in result.output
        assert len(pvz_service.list_all_pickup_points()) == 1

    def test_create_rejects_unknown_city(self, app, db_session):
        result = app.test_cli_runner().invoke(args=["pvz", "create", "--city", "Омск"])
        assert result.exit_code != 0
        assert pvz_service.list_all_pickup_points() == []

    def test_list_empty(self, app, db_session):
        result = app.test_cli_runner().invoke(args=["pvz", "list"])
        assert "No pickup points found." in result.output


class TestUserCommands:

    def test_create_user(self, app, db_session):
        result = app.test_cli_runner().invoke(args=[
            "users", "create",
            "--email", "mod@pvz.local",
            "--password", "secret1",
            "--role", "moderator",
        ])

        assert result.exit_code == 0
        assert "PASS Created user: mod@pvz.local" in result.output
        assert db_session.query(User).filter_by(email="mod@pvz.local").one().role == "moderator"

    def test_short_password(self, app, db_session):
        result = app.test_cli_runner().invoke(args=[
            "users", "create",
            "--email", "mod@pvz.local",
            "--password", "123",
            "--role", "moderator",
        ])

        assert "FAIL" in result.output
        assert db_session.query(User).count() == 0


class TestDbAdminCommands:

    def test_reset_requires_confirmation(self, app, pickup_point):
        result = app.test_cli_runner().invoke(args=["db-admin", "reset"])

        assert "FAIL" in result.output
        assert len(pvz_service.list_all_pickup_points()) == 1
