"""Tests for the action column."""

import pytest

from columns import ActionColumn, ButtonDefinition, Constant, Predicate, extract_key
from markup import a

VIEW = '<a href="http://test.com" title="View" aria-label="View" data-name="view"><span>&#128065;</span></a>'
UPDATE = '<a href="http://test.com" title="Update" aria-label="Update" data-name="update"><span>&#128393;</span></a>'
DELETE = (
    '<a href="http://test.com" title="Delete" aria-label="Delete" data-name="delete" '
    'data-confirm="Are you sure you want to delete this item?" data-method="post"><span>&#128465;</span></a>'
)


@pytest.mark.unit
def test_default_buttons(action_column):
    """Test the builtin buttons and their order."""
    assert list(action_column.buttons) == ["view", "update", "delete"]


@pytest.mark.unit
def test_render_default_buttons(action_column, stub_url_creator, row):
    """Test default buttons render in template order inside a cell."""
    action_column.url_creator = stub_url_creator
    assert action_column.render_row(row, 1, 0) == f"<td>{VIEW} {UPDATE} {DELETE}</td>"


@pytest.mark.unit
def test_render_follows_template_order(action_column, stub_url_creator, row):
    """Test output order is the template's, not the registry's."""
    action_column.url_creator = stub_url_creator
    html = action_column.render_row(row, 1, 0, template="{delete}{view}")
    assert html == f"<td>{DELETE} {VIEW}</td>"


@pytest.mark.unit
def test_default_urls(action_column, row):
    """Test default URLs put the key in the path under the controller."""
    html = action_column.render_buttons(row, 1, 0, template="{view}")
    assert 'href="/admin/view/1"' in html


@pytest.mark.unit
def test_button_options():
    """Test button options are applied to the builtin buttons."""
    column = ActionColumn(controller="admin", button_options={"disabled": True})
    html = column.render_row({"id": 1}, 1, 0)

    assert html == (
        '<td><a href="/admin/view/1" disabled title="View" aria-label="View" data-name="view">'
        "<span>&#128065;</span></a> "
        '<a href="/admin/update/1" disabled title="Update" aria-label="Update" data-name="update">'
        "<span>&#128393;</span></a> "
        '<a href="/admin/delete/1" disabled title="Delete" aria-label="Delete" data-name="delete" '
        'data-confirm="Are you sure you want to delete this item?" data-method="post">'
        "<span>&#128465;</span></a></td>"
    )


@pytest.mark.unit
def test_custom_button():
    """Test a registered button rendered through the default URL creator."""
    column = ActionColumn(
        template="{admin/custom}",
        buttons={
            "admin/custom": lambda url, row, key: a(
                "custon", url, {"class": "text-danger", "title": "Custom"}
            ),
        },
    )
    assert column.render_row({"id": 1}, 1, 0) == (
        '<td><a class="text-danger" href="/admin/custom/1" title="Custom">custon</a></td>'
    )


@pytest.mark.unit
def test_primary_key_in_query():
    """Test a custom primary key is passed as a query parameter."""
    column = ActionColumn(
        template="{admin/custom}",
        primary_key="user_id",
        buttons={
            "admin/custom": lambda url, row, key: a(
                "admin/custom", url, {"class": "text-danger", "title": "Custom"}
            ),
        },
    )
    assert column.render_row({"user_id": 1}, 1, 0) == (
        '<td><a class="text-danger" href="/admin/custom?user_id=1" title="Custom">admin/custom</a></td>'
    )


@pytest.mark.unit
def test_one_button_matched(action_column):
    """Test only registered names become active."""
    assert list(action_column.get_active_buttons("{show} {edit} {delete}")) == ["delete"]


@pytest.mark.unit
def test_no_matched_results(action_column):
    """Test a template with no registered names."""
    assert action_column.get_active_buttons("{show} {edit} {remove}") == {}


@pytest.mark.unit
def test_dash_in_placeholder(action_column):
    """Test a dashed placeholder is one unknown name, not a parse error."""
    assert action_column.get_active_buttons("{show-items}") == {}


@pytest.mark.unit
def test_empty_cell_when_nothing_matches(action_column, row):
    """Test zero active buttons render an empty cell."""
    assert action_column.render_row(row, 1, 0, template="{show-items}") == "<td></td>"


@pytest.mark.unit
def test_register_buttons_overrides(action_column, stub_url_creator, row):
    """Test later registrations replace same-named buttons."""
    action_column.url_creator = stub_url_creator
    action_column.register_buttons({"update": lambda url, row, key: "first"})
    action_column.register_buttons({"update": lambda url, row, key: "update_button"})

    assert list(action_column.buttons) == ["view", "update", "delete"]
    assert action_column.render_row(row, 1, 0, template="{update}") == "<td>update_button</td>"


@pytest.mark.unit
def test_register_definition_under_other_name(action_column):
    """Test a definition registered under a key takes that key as its name."""
    button = ButtonDefinition(name="tmp", render=lambda url, row, key: url)
    action_column.register_buttons({"export": button})
    assert action_column.buttons["export"].name == "export"


@pytest.mark.unit
def test_registering_does_not_touch_defaults(action_column):
    """Test columns do not share a mutable registry."""
    action_column.register_buttons({"archive": lambda url, row, key: "x"})
    assert "archive" not in ActionColumn().buttons


@pytest.mark.unit
def test_visible_buttons(stub_url_creator, row):
    """Test constant and callback visibility, set after construction."""
    column = ActionColumn(
        url_creator=stub_url_creator,
        template="{update}",
        buttons={"update": lambda url, row, key: "update_button"},
    )

    # default visible
    assert column.render_row(row, 1, 0) == "<td>update_button</td>"

    column.visible_buttons = {"update": True}
    assert column.render_row(row, 1, 0) == "<td>update_button</td>"

    column.visible_buttons = {"update": lambda row, key, index: row["id"] == 1}
    assert column.render_row(row, 1, 0) == "<td>update_button</td>"

    column.visible_buttons = {"update": False}
    assert column.render_row(row, 1, 0) == "<td></td>"

    column.visible_buttons = {"update": lambda row, key, index: row["id"] != 1}
    assert column.render_row(row, 1, 0) == "<td></td>"


@pytest.mark.unit
def test_visibility_is_per_row(action_column, stub_url_creator):
    """Test a predicate is evaluated for each row."""
    action_column.url_creator = stub_url_creator
    action_column.visible_buttons = {"delete": lambda row, key, index: row["id"] % 2 == 0}

    assert "data-name=\"delete\"" not in action_column.render_row({"id": 1}, 1, 0)
    assert "data-name=\"delete\"" in action_column.render_row({"id": 2}, 2, 1)


@pytest.mark.unit
def test_visibility_rules_are_converted(action_column):
    """Test raw values become tagged rules."""
    action_column.visible_buttons = {"view": False, "update": lambda row, key, index: True}
    assert action_column.visible_buttons["view"] == Constant(False)
    assert isinstance(action_column.visible_buttons["update"], Predicate)


@pytest.mark.unit
def test_unmatched_visibility_entries(action_column, stub_url_creator, row):
    """Test rules for unknown buttons are ignored."""
    action_column.url_creator = stub_url_creator
    action_column.visible_buttons = {"missing": False}
    assert action_column.render_row(row, 1, 0) == f"<td>{VIEW} {UPDATE} {DELETE}</td>"


@pytest.mark.unit
def test_render_callback_errors_propagate(row):
    """Test button render failures reach the caller."""
    def broken(url, row, key):
        raise RuntimeError("boom")

    column = ActionColumn(template="{broken}", buttons={"broken": broken})
    with pytest.raises(RuntimeError):
        column.render_row(row, 1, 0)


@pytest.mark.unit
def test_url_creator_arguments(row):
    """Test the URL creator receives action, row, key and index."""
    calls = []

    def creator(action, row, key, index):
        calls.append((action, row, key, index))
        return f"/{action}"

    column = ActionColumn(url_creator=creator, template="{view} {delete}")
    column.render_row(row, 1, 4)
    assert calls == [("view", row, 1, 4), ("delete", row, 1, 4)]


@pytest.mark.unit
def test_content_options(stub_url_creator, row):
    """Test cell attributes."""
    column = ActionColumn(
        url_creator=stub_url_creator, template="{view}", content_options={"class": "actions"}
    )
    assert column.render_row(row, 1, 0) == f'<td class="actions">{VIEW}</td>'


@pytest.mark.unit
def test_create_url_with_non_mapping_row(action_column):
    """Test the caller key is used when the row is not a mapping."""
    assert action_column.create_url("view", object(), 42, 0) == "/admin/view/42"


@pytest.mark.unit
def test_create_url_with_composite_key(action_column):
    """Test a mapping key becomes the URL parameters."""
    url = action_column.create_url("view", object(), {"order_id": 3, "line": 2}, 0)
    assert url == "/admin/view?order_id=3&line=2"


@pytest.mark.unit
def test_extract_key():
    """Test primary key extraction."""
    assert extract_key({"id": 5}, "id", 1) == 5
    assert extract_key({"user_id": 5}, "id", 1) == 1
    assert extract_key(["not", "a", "mapping"], "id", 9) == 9


@pytest.mark.unit
def test_button_options_cannot_replace_url(row):
    """Test the resolved URL wins over an href in the button options."""
    column = ActionColumn(controller="admin", button_options={"href": "#"}, template="{view}")
    assert column.render_row(row, 1, 0).startswith('<td><a href="/admin/view/1" title="View"')


@pytest.mark.unit
def test_button_options_read_only():
    """Test button options are fixed once the builtin buttons are built."""
    column = ActionColumn(button_options={"disabled": True})
    assert column.button_options == {"disabled": True}

    with pytest.raises(AttributeError):
        column.button_options = {}
    with pytest.raises(TypeError):
        column.button_options["class"] = "btn"


@pytest.mark.unit
def test_missing_key_is_left_out_of_url(action_column):
    """Test a row without a key does not produce a 'None' parameter."""
    assert action_column.create_url("view", {"name": "x"}, None, 0) == "/admin/view"

    column = ActionColumn(controller="admin", primary_key="user_id")
    assert column.create_url("view", {"name": "x"}, None, 0) == "/admin/view"
    assert column.create_url("view", object(), {"user_id": None, "org": 2}, 0) == "/admin/view?org=2"


@pytest.mark.unit
def test_visibility_change_flips_only_that_button(action_column, stub_url_creator, row):
    """Test replacing one predicate changes that button and leaves the others."""
    action_column.url_creator = stub_url_creator
    action_column.visible_buttons = {"delete": lambda row, key, index: True}
    assert action_column.render_row(row, 1, 0) == f"<td>{VIEW} {UPDATE} {DELETE}</td>"

    action_column.visible_buttons = {"delete": lambda row, key, index: False}
    assert action_column.render_row(row, 1, 0) == f"<td>{VIEW} {UPDATE}</td>"
