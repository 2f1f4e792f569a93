"""Unit tests for app.core.policy: ownership and role rules without HTTP or a database."""

import unittest
from types import SimpleNamespace

from fastapi import HTTPException

from app.core.errors import ErrorKind
from app.core.policy import (
    Action,
    creation_fields,
    decide,
    decide_profile_read,
    decide_profile_update,
    enforce,
    list_owner_filter,
    require_admin,
    update_fields,
)
from app.models.user import Role
from app.schemas.auth import CurrentUser


def _caller(user_id: int = 1, role: Role = Role.ATHLETE) -> CurrentUser:
    return CurrentUser(id=user_id, name=f"User {user_id}", email=f"u{user_id}@example.com", role=role)


def _record(owner_id: int) -> SimpleNamespace:
    return SimpleNamespace(id=10, user_id=owner_id)


ATHLETE = _caller(1)
OTHER_ATHLETE = _caller(2)
ADMIN = _caller(99, Role.ADMIN)


class TestSingleResourceDecisions(unittest.TestCase):
    """READ/UPDATE/DELETE: owner or admin; missing resource is NOT_FOUND."""

    def test_owner_allowed_for_every_action(self) -> None:
        for action in (Action.READ, Action.UPDATE, Action.DELETE):
            with self.subTest(action=action):
                self.assertTrue(decide(ATHLETE, action, _record(1), "goal").allowed)

    def test_admin_allowed_on_others_records(self) -> None:
        for action in (Action.READ, Action.UPDATE, Action.DELETE):
            with self.subTest(action=action):
                self.assertTrue(decide(ADMIN, action, _record(1), "workout").allowed)

    def test_non_owner_forbidden_with_action_specific_message(self) -> None:
        expected = {
            Action.READ: "You can only view your own goal",
            Action.UPDATE: "You can only update your own goal",
            Action.DELETE: "You can only delete your own goal",
        }
        for action, message in expected.items():
            with self.subTest(action=action):
                decision = decide(OTHER_ATHLETE, action, _record(1), "goal")
                self.assertFalse(decision.allowed)
                self.assertIs(decision.error.kind, ErrorKind.FORBIDDEN)
                self.assertEqual(decision.error.status_code, 403)
                self.assertEqual(decision.error.message, message)

    def test_missing_resource_is_not_found_even_for_admin(self) -> None:
        for caller in (ATHLETE, ADMIN):
            with self.subTest(role=caller.role):
                decision = decide(caller, Action.READ, None, "workout")
                self.assertIs(decision.error.kind, ErrorKind.NOT_FOUND)
                self.assertEqual(decision.error.status_code, 404)
                self.assertEqual(decision.error.message, "Workout not found")

    def test_list_and_create_always_allowed(self) -> None:
        for caller in (ATHLETE, ADMIN):
            self.assertTrue(decide(caller, Action.LIST).allowed)
            self.assertTrue(decide(caller, Action.CREATE).allowed)


class TestOwnershipFields(unittest.TestCase):
    def test_list_filter_for_athlete_is_own_id(self) -> None:
        self.assertEqual(list_owner_filter(ATHLETE), 1)

    def test_list_filter_for_admin_is_none(self) -> None:
        self.assertIsNone(list_owner_filter(ADMIN))

    def test_creation_forces_owner_to_caller(self) -> None:
        fields = creation_fields(ATHLETE, {"description": "Run a marathon", "user_id": 2})
        self.assertEqual(fields["user_id"], 1)
        self.assertEqual(fields["description"], "Run a marathon")

    def test_creation_adds_owner_when_absent(self) -> None:
        self.assertEqual(creation_fields(ADMIN, {"type": "Running"})["user_id"], 99)

    def test_creation_does_not_mutate_payload(self) -> None:
        payload = {"user_id": 5}
        creation_fields(ATHLETE, payload)
        self.assertEqual(payload, {"user_id": 5})

    def test_update_strips_owner(self) -> None:
        self.assertEqual(
            update_fields({"status": "completed", "user_id": 2}),
            {"status": "completed"},
        )


class TestAdminOnly(unittest.TestCase):
    def test_admin_allowed(self) -> None:
        self.assertTrue(require_admin(ADMIN).allowed)

    def test_athlete_forbidden(self) -> None:
        decision = require_admin(ATHLETE)
        self.assertIs(decision.error.kind, ErrorKind.FORBIDDEN)
        self.assertEqual(decision.error.message, "Insufficient permissions")


class TestProfileRead(unittest.TestCase):
    def test_self_allowed(self) -> None:
        self.assertTrue(decide_profile_read(ATHLETE, 1).allowed)

    def test_admin_allowed_on_anyone(self) -> None:
        self.assertTrue(decide_profile_read(ADMIN, 1).allowed)

    def test_other_athlete_forbidden(self) -> None:
        decision = decide_profile_read(OTHER_ATHLETE, 1)
        self.assertEqual(decision.error.status_code, 403)
        self.assertEqual(decision.error.message, "You can only view your own profile")


class TestProfileUpdate(unittest.TestCase):
    def setUp(self) -> None:
        self.target = SimpleNamespace(id=1, email="u1@example.com")

    def test_self_may_change_name(self) -> None:
        self.assertTrue(decide_profile_update(ATHLETE, 1, self.target, {"name": "New"}).allowed)

    def test_other_athlete_forbidden_before_existence_check(self) -> None:
        decision = decide_profile_update(OTHER_ATHLETE, 1, None, {"name": "x"})
        self.assertIs(decision.error.kind, ErrorKind.FORBIDDEN)

    def test_missing_target_not_found_for_admin(self) -> None:
        decision = decide_profile_update(ADMIN, 12345, None, {"name": "x"})
        self.assertIs(decision.error.kind, ErrorKind.NOT_FOUND)
        self.assertEqual(decision.error.message, "User not found")

    def test_self_role_change_forbidden(self) -> None:
        decision = decide_profile_update(ATHLETE, 1, self.target, {"role": Role.ADMIN})
        self.assertIs(decision.error.kind, ErrorKind.FORBIDDEN)
        self.assertEqual(decision.error.message, "Only admins can change user roles")

    def test_admin_role_change_allowed(self) -> None:
        self.assertTrue(
            decide_profile_update(ADMIN, 1, self.target, {"role": Role.ADMIN}).allowed
        )

    def test_email_change_rejected_even_for_admin(self) -> None:
        for caller in (ATHLETE, ADMIN):
            with self.subTest(role=caller.role):
                decision = decide_profile_update(
                    caller, 1, self.target, {"email": "new@example.com"}
                )
                self.assertIs(decision.error.kind, ErrorKind.BAD_REQUEST)
                self.assertEqual(decision.error.status_code, 400)

    def test_unchanged_email_allowed(self) -> None:
        self.assertTrue(
            decide_profile_update(ATHLETE, 1, self.target, {"email": "u1@example.com"}).allowed
        )

    def test_blank_email_treated_as_absent(self) -> None:
        self.assertTrue(
            decide_profile_update(ATHLETE, 1, self.target, {"email": ""}).allowed
        )


class TestEnforce(unittest.TestCase):
    def test_allowed_is_noop(self) -> None:
        enforce(decide(ATHLETE, Action.READ, _record(1), "goal"))

    def test_denied_raises_http_exception(self) -> None:
        with self.assertRaises(HTTPException) as ctx:
            enforce(decide(OTHER_ATHLETE, Action.DELETE, _record(1), "goal"))
        self.assertEqual(ctx.exception.status_code, 403)
        self.assertEqual(ctx.exception.detail, "You can only delete your own goal")


if __name__ == "__main__":
    unittest.main()
