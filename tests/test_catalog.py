import pytest

from design_studio.catalog import TOOLS, ToolCategory, get_tool, tools_by_category
from design_studio.schemas import Action


def test_tool_ids_are_unique():
    ids = [tool.id for tool in TOOLS]
    assert len(ids) == len(set(ids))


def test_every_action_has_a_tool():
    used = {tool.action for tool in TOOLS if tool.action is not None}
    assert used == set(Action)


def test_get_tool():
    tool = get_tool("brand-identity-kit")
    assert tool.action is Action.GENERATE_BRAND_KIT
    assert tool.implemented
    assert tool.to_dict()["category"] == ToolCategory.PROJECT_SPECIFIC.value

    with pytest.raises(KeyError):
        get_tool("time-machine")


def test_tools_by_category_keeps_every_tool():
    grouped = tools_by_category()
    assert set(grouped) == set(ToolCategory)
    assert sum(len(tools) for tools in grouped.values()) == len(TOOLS)
