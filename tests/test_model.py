from sidequest.model import Quest, User


def test_quest_defaults():
    quest = Quest()
    assert quest.id == 0
    assert quest.caption == ""
    assert quest.parent is None
    assert quest.subquests == []


def test_quest_subquest_lists_are_independent():
    first = Quest()
    second = Quest()
    first.subquests.append(Quest(caption="child"))
    assert second.subquests == []
    assert len(first.subquests) == 1


def test_quest_parent_link():
    parent = Quest(id=3, caption="root")
    child = Quest(caption="leaf", parent=parent)
    parent.subquests.append(child)
    assert child.parent is parent
    assert parent.subquests[0].caption == "leaf"


def test_quest_repr_does_not_recurse():
    parent = Quest(id=1, caption="root")
    child = Quest(id=2, caption="leaf", parent=parent)
    parent.subquests.append(child)
    assert "root" in repr(parent)


def test_user_with_email_only():
    user = User("someone@example.com")
    assert user.email == "someone@example.com"
    assert user.display_name == ""
    assert user.password == ""
    assert user.main_quests == []


def test_user_positional_order():
    user = User("someone@example.com", "Temporary User", "")
    assert user.email == "someone@example.com"
    assert user.display_name == "Temporary User"
    assert user.password == ""


def test_user_password_hidden_from_repr():
    password = "password"
    user = User(email="someone@example.com", password=password)
    assert user.password == password
    assert password not in repr(user)