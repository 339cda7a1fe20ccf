"""
Headless tests for the Textual application.

Drives the real widgets through Textual's pilot to check that key presses
reach the navigation state machine and its outcomes reach the widgets.

Created: 2026-10-19
"""

import pytest

from favbrowse.core.models import Pane
from favbrowse.tui.app import FavbrowseApp
from favbrowse.tui.ui.browser_view import DetailsTable, FavoritesList
from favbrowse.tui.ui.status_bar import StatusBar


@pytest.fixture
def app(settings, favorites):
    return FavbrowseApp(settings=settings, favorites=favorites)


@pytest.mark.asyncio
async def test_starts_with_favorites_focused(app):
    """Test the favorites list has focus and lists every favorite."""
    async with app.run_test() as pilot:
        await pilot.pause()

        assert isinstance(app.focused, FavoritesList)
        assert app.navigator.focused_pane is Pane.FAVORITES

        favorites_list = app.query_one(FavoritesList)
        assert [item.name for item in favorites_list.children] == ["Sample", "Missing"]


@pytest.mark.asyncio
async def test_highlight_refreshes_details(app, sample_dir, missing_dir):
    """Test moving through favorites re-projects the details table."""
    async with app.run_test() as pilot:
        await pilot.press("down")
        await pilot.pause()

        assert app.navigator.state.selected_favorite == "Missing"
        assert app.navigator.table.is_error
        table = app.query_one(DetailsTable)
        assert table.row_count == 1
        assert table.model.path == str(missing_dir)

        await pilot.press("up")
        await pilot.pause()

        assert app.navigator.state.selected_favorite == "Sample"
        assert table.row_count == 2
        assert len(table.columns) == 4
        assert app.query_one(StatusBar).context == str(sample_dir)


@pytest.mark.asyncio
async def test_focus_round_trip_and_selection(app):
    """Test enter moves to details, enter reports, escape returns."""
    async with app.run_test() as pilot:
        await pilot.press("down", "up")
        await pilot.pause()

        await pilot.press("enter")
        await pilot.pause()

        assert app.navigator.focused_pane is Pane.DETAILS
        assert isinstance(app.focused, DetailsTable)

        await pilot.press("enter")
        await pilot.pause()

        assert app.selected_items == ["a.txt"]
        assert app.navigator.focused_pane is Pane.DETAILS

        await pilot.press("escape")
        await pilot.pause()

        assert app.navigator.focused_pane is Pane.FAVORITES
        assert isinstance(app.focused, FavoritesList)

        await pilot.press("escape")
        await pilot.pause()

        assert app.navigator.focused_pane is Pane.FAVORITES


@pytest.mark.asyncio
async def test_refresh_binding(app, sample_dir):
    """Test ctrl+r picks up new files."""
    async with app.run_test() as pilot:
        await pilot.press("down", "up")
        await pilot.pause()

        (sample_dir / "b.txt").write_text("b")
        await pilot.press("ctrl+r")
        await pilot.pause()

        assert app.query_one(DetailsTable).row_count == 3


@pytest.mark.asyncio
async def test_tab_focus_keeps_navigation_in_step(app):
    """Test tab and shift+tab move the navigation state with the focus."""
    async with app.run_test() as pilot:
        await pilot.press("down", "up")
        await pilot.pause()

        await pilot.press("tab")
        await pilot.pause()

        assert isinstance(app.focused, DetailsTable)
        assert app.navigator.focused_pane is Pane.DETAILS

        await pilot.press("enter")
        await pilot.pause()

        assert app.selected_items == ["a.txt"]

        await pilot.press("shift+tab")
        await pilot.pause()

        assert isinstance(app.focused, FavoritesList)
        assert app.navigator.focused_pane is Pane.FAVORITES
        assert app.query_one(StatusBar).pane == Pane.FAVORITES.value


@pytest.mark.asyncio
async def test_newer_status_message_not_cleared_early(app):
    """Test an earlier message's timer does not reset a newer message."""
    async with app.run_test() as pilot:
        status_bar = app.query_one(StatusBar)
        status_bar.show_message("first", duration=0.1)
        status_bar.show_message("second", duration=5)

        await pilot.pause(0.3)

        assert status_bar.message == "second"
