from app.domain.status import Status


async def test_register_and_authenticate(quiz_app):
    assert await quiz_app.users.register('bob', 'b@x.com', 'pw1', False) is Status.SUCCESS
    user = await quiz_app.users.authenticate('bob', 'pw1')
    assert user.username == 'bob'
    assert user.email == 'b@x.com'
    assert user.is_admin is False
    assert user.created_at is not None
    assert user.password_hash is None
    assert user.salt is None


async def test_duplicate_username_is_conflict(quiz_app):
    assert await quiz_app.users.register('bob', 'b@x.com', 'pw1', False) is Status.SUCCESS
    assert await quiz_app.users.register('bob', 'other@x.com', 'pw2', True) is Status.CONFLICT
    # The first registration is untouched
    assert await quiz_app.users.authenticate('bob', 'pw1') is not None
    assert await quiz_app.users.authenticate('bob', 'pw2') is None


async def test_username_is_case_sensitive(quiz_app):
    assert await quiz_app.users.register('bob', 'b@x.com', 'pw1') is Status.SUCCESS
    assert await quiz_app.users.register('Bob', 'b@x.com', 'pw1') is Status.SUCCESS
    assert await quiz_app.users.authenticate('BOB', 'pw1') is None


async def test_wrong_password_and_unknown_user_are_denied(quiz_app):
    await quiz_app.users.register('carol', 'c@x.com', 'hunter2', False)
    assert await quiz_app.users.authenticate('carol', 'hunter3') is None
    assert await quiz_app.users.authenticate('carol', 'Hunter2') is None
    assert await quiz_app.users.authenticate('carol', '') is None
    assert await quiz_app.users.authenticate('nobody', 'hunter2') is None


async def test_password_is_not_stored_in_cleartext(quiz_app):
    await quiz_app.users.register('dave', 'd@x.com', 'plaintext', False)
    stored = await quiz_app.repo_service.sql_user_repo.get_by_username('dave')
    assert stored.password_hash != 'plaintext'
    assert 'plaintext' not in stored.salt
    assert quiz_app.repo_service.password_hasher.verify('plaintext', stored.salt, stored.password_hash)


async def test_get_user(quiz_app):
    await quiz_app.users.register('erin', 'e@x.com', 'pw', True)
    user = await quiz_app.users.authenticate('erin', 'pw')
    fetched = await quiz_app.users.get(user.id)
    assert fetched.model_dump() == user.model_dump()
    assert await quiz_app.users.get(999) is None


async def test_missing_email_is_a_store_error_not_a_conflict(quiz_app):
    assert await quiz_app.users.register('zed', None, 'pw') is Status.STORE_ERROR
    assert await quiz_app.users.authenticate('zed', 'pw') is None
    assert await quiz_app.users.register('zed', 'z@x.com', 'pw') is Status.SUCCESS
