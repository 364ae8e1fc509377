"""
test_app.py - Tests for the Streamlit UI, driven headlessly with AppTest
"""

import pytest
from streamlit.testing.v1 import AppTest


@pytest.fixture
def app():
    at = AppTest.from_file("app.py", default_timeout=30)
    at.run()
    assert not at.exception
    return at


def click(at, key):
    at.button(key=key).click().run()
    assert not at.exception


def markdown_values(at):
    return [element.value for element in at.markdown]


def move_labels(at):
    return [button.label for button in at.button if button.label.startswith("Go to")]


def test_initial_render(app):
    assert "**Next player: X**" in markdown_values(app)
    assert move_labels(app) == ["Go to game start"]
    assert all(app.button(key=f"cell_{i}").label.strip() == "" for i in range(9))


def test_clicking_a_cell_plays(app):
    click(app, "cell_4")

    assert app.button(key="cell_4").label == "X"
    assert "**Next player: O**" in markdown_values(app)
    assert move_labels(app) == ["Go to game start", "Go to move #1"]


def test_clicking_an_occupied_cell_is_ignored(app):
    click(app, "cell_4")
    click(app, "cell_4")

    assert app.button(key="cell_4").label == "X"
    assert app.session_state["game"].current_move == 1


def test_winner_is_shown(app):
    for position in [0, 4, 1, 3, 2]:
        click(app, f"cell_{position}")

    assert "**Winner: X**" in markdown_values(app)

    click(app, "cell_8")
    assert app.button(key="cell_8").label.strip() == ""


def test_jump_to_move_and_replay(app):
    click(app, "cell_0")
    click(app, "cell_1")
    click(app, "move_0")

    assert app.button(key="cell_0").label.strip() == ""
    assert "**Next player: X**" in markdown_values(app)
    assert len(move_labels(app)) == 3

    click(app, "cell_4")

    assert move_labels(app) == ["Go to game start", "Go to move #1"]
    assert app.button(key="cell_4").label == "X"
    assert app.session_state["game"].history[1][0] == ""
