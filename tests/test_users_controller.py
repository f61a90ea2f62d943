"""Tests for the admin user handlers: create, update, delete one, delete many."""

import json

import pytest

from user_admin.errors import ApplicationError, ValidationError
from tests.conftest import make_role, make_user


def _json(response) -> dict:
    return json.loads(response.body)


# ---------------------------------------------------------------------------
# create
# ---------------------------------------------------------------------------


class TestCreate:
    @pytest.mark.asyncio
    async def test_lowercases_email_and_returns_registration_token(self, controller, user_service):
        response = await controller.create(
            {"email": "Foo@Bar.com", "firstname": "A", "lastname": "B", "roles": [1]}
        )

        assert response.status_code == 201
        data = _json(response)["data"]
        assert data["email"] == "foo@bar.com"
        assert isinstance(data["registrationToken"], str)
        assert len(data["registrationToken"]) == 40

        user_service.exists.assert_awaited_once_with(email="foo@bar.com")
        attributes = user_service.create.await_args.args[0]
        assert attributes.email == "foo@bar.com"
        assert attributes.is_active is False

    @pytest.mark.asyncio
    async def test_only_whitelisted_attributes_are_persisted(self, controller, user_service):
        await controller.create({
            "email": "a@b.co",
            "firstname": "A",
            "roles": [1],
            "isActive": True,
            "registrationToken": "attacker-chosen",
            "password": "Whatever123",
        })

        attributes = user_service.create.await_args.args[0]
        assert attributes.is_active is False
        assert attributes.registration_token != "attacker-chosen"
        assert not hasattr(attributes, "password")

    @pytest.mark.asyncio
    async def test_sso_registration_activates_without_token(self, controller, user_service):
        response = await controller.create({
            "email": "sso@corp.io",
            "firstname": "S",
            "roles": [2],
            "useSSORegistration": True,
        })

        attributes = user_service.create.await_args.args[0]
        assert attributes.registration_token is None
        assert attributes.is_active is True

        data = _json(response)["data"]
        assert data["registrationToken"] is None
        assert data["isActive"] is True

    @pytest.mark.asyncio
    async def test_duplicate_email_rejected_without_write(self, controller, user_service):
        user_service.exists.return_value = True

        with pytest.raises(ApplicationError, match="Email already taken"):
            await controller.create({"email": "FOO@bar.com", "firstname": "A", "roles": [1]})

        user_service.exists.assert_awaited_once_with(email="foo@bar.com")
        user_service.create.assert_not_awaited()

    @pytest.mark.asyncio
    async def test_missing_email_is_validation_error(self, controller, user_service):
        with pytest.raises(ValidationError) as exc_info:
            await controller.create({"firstname": "A", "roles": [1]})

        paths = [e["path"] for e in exc_info.value.details["errors"]]
        assert ["email"] in paths
        user_service.exists.assert_not_awaited()

    @pytest.mark.asyncio
    async def test_response_never_exposes_password_hash(self, controller):
        response = await controller.create({"email": "a@b.co", "firstname": "A", "roles": [1]})

        data = _json(response)["data"]
        assert "passwordHash" not in data
        assert "password" not in data
        assert "resetPasswordToken" not in data


# ---------------------------------------------------------------------------
# update
# ---------------------------------------------------------------------------


class TestUpdate:
    @pytest.mark.asyncio
    async def test_updates_and_runs_disabled_list_hook(self, controller, user_service):
        user_service.update_by_id.return_value = make_user(user_id=7, firstname="New")

        response = await controller.update(7, {"firstname": "New", "isActive": False})

        assert response.status_code == 200
        assert _json(response)["data"]["firstname"] == "New"

        data = user_service.update_by_id.await_args.args[1]
        assert data.changes() == {"firstname": "New", "is_active": False}
        user_service.should_update_ee_disabled_users_list.assert_awaited_once_with(7, data)
        user_service.exists.assert_not_awaited()

    @pytest.mark.asyncio
    async def test_email_change_checks_uniqueness_excluding_self(self, controller, user_service):
        user_service.update_by_id.return_value = make_user(user_id=7, email="new@x.io")

        await controller.update(7, {"email": "new@x.io"})

        user_service.exists.assert_awaited_once_with(email="new@x.io", exclude_id=7)

    @pytest.mark.asyncio
    async def test_email_taken_by_other_user_rejected_without_write(self, controller, user_service):
        user_service.exists.return_value = True

        with pytest.raises(ApplicationError, match="A user with this email address already exists"):
            await controller.update(7, {"email": "taken@x.io"})

        user_service.update_by_id.assert_not_awaited()
        user_service.should_update_ee_disabled_users_list.assert_not_awaited()

    @pytest.mark.asyncio
    async def test_unknown_user_returns_not_found_without_hook(self, controller, user_service):
        response = await controller.update(999, {"firstname": "X"})

        assert response.status_code == 404
        body = _json(response)
        assert body["data"] is None
        assert body["error"]["message"] == "User does not exist"
        user_service.should_update_ee_disabled_users_list.assert_not_awaited()

    @pytest.mark.asyncio
    async def test_weak_password_is_validation_error(self, controller, user_service):
        with pytest.raises(ValidationError):
            await controller.update(7, {"password": "short"})

        user_service.update_by_id.assert_not_awaited()

    @pytest.mark.asyncio
    async def test_unknown_field_is_validation_error(self, controller, user_service):
        with pytest.raises(ValidationError):
            await controller.update(7, {"registrationToken": "abc"})

        user_service.update_by_id.assert_not_awaited()


# ---------------------------------------------------------------------------
# delete one
# ---------------------------------------------------------------------------


class TestDeleteOne:
    @pytest.mark.asyncio
    async def test_deletes_and_removes_from_disabled_list(self, controller, user_service):
        user_service.delete_by_id.return_value = make_user(user_id=3, registration_token="secret")

        response = await controller.delete_one(3)

        assert response.status_code == 200
        data = _json(response)["data"]
        assert data["id"] == 3
        assert "registrationToken" not in data
        user_service.should_remove_from_ee_disabled_users_list.assert_awaited_once_with(3)

    @pytest.mark.asyncio
    async def test_unknown_user_returns_not_found_without_hook(self, controller, user_service):
        response = await controller.delete_one(404)

        assert response.status_code == 404
        assert _json(response)["error"]["message"] == "User not found"
        user_service.should_remove_from_ee_disabled_users_list.assert_not_awaited()


# ---------------------------------------------------------------------------
# delete many
# ---------------------------------------------------------------------------


class TestDeleteMany:
    @pytest.mark.asyncio
    async def test_returns_only_users_actually_deleted(self, controller, user_service):
        user_service.delete_by_ids.return_value = [
            make_user(user_id=1, email="one@x.io"),
            make_user(user_id=2, email="two@x.io", roles=[make_role(3, name="Author")]),
        ]

        response = await controller.delete_many({"ids": [1, 2, 99]})

        assert response.status_code == 200
        data = _json(response)["data"]
        assert [u["id"] for u in data] == [1, 2]
        assert data[1]["roles"][0]["name"] == "Author"
        user_service.delete_by_ids.assert_awaited_once_with([1, 2, 99])
        user_service.should_remove_from_ee_disabled_users_list.assert_awaited_once_with([1, 2, 99])

    @pytest.mark.asyncio
    async def test_empty_ids_is_validation_error(self, controller, user_service):
        with pytest.raises(ValidationError):
            await controller.delete_many({"ids": []})

        user_service.delete_by_ids.assert_not_awaited()

    @pytest.mark.asyncio
    async def test_missing_body_is_validation_error(self, controller, user_service):
        with pytest.raises(ValidationError):
            await controller.delete_many(None)

        user_service.delete_by_ids.assert_not_awaited()
