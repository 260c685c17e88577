"""Tests for the field-controller node model."""
import pytest

from mapeditor import (
    FieldKind,
    FieldNode,
    choice_field,
    color_field,
    container_field,
    find_field,
    get_root_field,
    list_field,
    other_field,
)


def test_factories_set_kind_and_parent():
    color = color_field("color", "#fff")
    root = container_field("root", [color])

    assert color.kind is FieldKind.COLOR
    assert root.kind is FieldKind.CONTAINER
    assert color.parent is root
    assert get_root_field(color) is root


def test_nodes_compare_by_identity():
    assert color_field("color", "#fff") != color_field("color", "#fff")


def test_children_only_on_containers_and_opaque_fields():
    with pytest.raises(TypeError):
        FieldNode(FieldKind.COLOR, "color", children=(color_field("x"),))

    opaque = other_field("image", children=[color_field("x")])
    assert len(opaque.children) == 1


def test_unknown_host_kind_may_nest_children():
    nested = color_field("color")
    slider = FieldNode("slider", "odd", children=(nested,))

    assert nested.parent is slider
    assert slider.kind_label == "slider"
    with pytest.raises(TypeError, match="slider field 'odd'"):
        slider.add_item(color_field("x"))


def test_choice_field_keeps_options():
    width = choice_field("pathWidth", "3", options=[("1", "Thin"), ("3", "Thick")])

    assert width.options == (("1", "Thin"), ("3", "Thick"))


class TestChangeNotification:
    def test_set_value_notifies_with_new_value(self):
        color = color_field("color", "#fff")
        received = []
        color.changes.append(received.append)

        color.set_value("#000")

        assert color.value == "#000"
        assert received == ["#000"]

    def test_clear_notifies_with_none(self):
        image = other_field("backgroundImage", {"path": "a.png"})
        received = []
        image.changes.append(received.append)

        image.clear()

        assert image.value is None
        assert received == [None]

    def test_failing_observer_does_not_stop_others(self, caplog):
        color = color_field("color")
        received = []

        def broken(_value):
            raise RuntimeError("boom")

        color.changes.extend([broken, received.append])
        color.set_value("#123")

        assert received == ["#123"]
        assert "boom" in caplog.text


class TestListStructure:
    def test_add_item_replaces_sequence(self):
        stages = list_field("stages")
        before = stages.items
        item = container_field("stage", [])

        stages.add_item(item)

        assert stages.items == (item,)
        assert stages.items is not before
        assert item.parent is stages

    def test_remove_and_move_notify_item_observers(self):
        a, b, c = (container_field("stage", []) for _ in range(3))
        stages = list_field("stages", [a, b, c])
        seen = []
        stages.item_changes.append(seen.append)

        stages.move_item(0, 2)
        stages.remove_item(b)

        assert seen == [(b, c, a), (c, a)]
        assert b.parent is None

    def test_remove_unknown_item_raises(self):
        stages = list_field("stages", [container_field("stage", [])])

        with pytest.raises(ValueError):
            stages.remove_item(container_field("stage", []))

    def test_structure_edits_need_list(self):
        with pytest.raises(TypeError):
            container_field("root", []).add_item(color_field("color"))

    def test_for_each_item(self):
        items = [color_field("color", str(i)) for i in range(3)]
        colors = list_field("colors", items)
        visited = []

        colors.for_each_item(visited.append)

        assert visited == items


class TestFindField:
    @pytest.fixture
    def form(self):
        return container_field("root", [
            container_field("backgroundImageSettings", [
                other_field("backgroundImage", {"path": "map.png"}),
            ]),
            list_field("stages", [
                container_field("stage", [color_field("color", "#fff")]),
            ]),
        ])

    def test_find_nested_field(self, form):
        image = find_field("backgroundImageSettings/backgroundImage", form)

        assert image is not None
        assert image.value == {"path": "map.png"}

    def test_find_through_list(self, form):
        color = find_field("stages/stage/color", form)

        assert color is not None
        assert color.value == "#fff"

    def test_missing_path_returns_none(self, form):
        assert find_field("backgroundImageSettings/missing", form) is None
        assert find_field("stages/other", form) is None
        assert find_field("anything", None) is None

    def test_empty_path_returns_root(self, form):
        assert find_field("", form) is form
