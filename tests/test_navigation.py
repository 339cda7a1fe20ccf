"""
Tests for the navigation state machine.

Created: 2026-10-19
"""

from favbrowse.core.models import Pane, RowKind, TableModel
from favbrowse.core.navigation import (
    NavigationStateMachine,
    FavoriteHighlightChanged,
    FavoriteConfirmed,
    DetailRowConfirmed,
    CancelRequested,
)


class TestInitialState:
    """Test the state before any event."""

    def test_starts_in_favorites(self, navigator):
        assert navigator.focused_pane is Pane.FAVORITES
        assert navigator.state.selected_favorite is None
        assert navigator.table == TableModel.empty()


class TestHighlight:
    """Test favorite highlight changes."""

    def test_known_favorite_projects_directory(self, navigator, sample_dir):
        """Test highlighting a favorite replaces the details table."""
        outcome = navigator.dispatch(FavoriteHighlightChanged("Sample"))

        assert outcome.table is not None
        assert outcome.table.path == str(sample_dir)
        assert [row.first_cell for row in outcome.table.data_rows] == ["a.txt", "sub"]
        assert navigator.table == outcome.table
        assert navigator.state.selected_favorite == "Sample"
        assert outcome.focused_pane is Pane.FAVORITES

    def test_unknown_label(self, navigator):
        """Test a label outside the registry shows the invalid indicator."""
        outcome = navigator.dispatch(FavoriteHighlightChanged("NotARealFavorite"))

        assert outcome.table == TableModel.invalid_favorite()
        assert outcome.table.rows[0].kind is RowKind.INDICATOR
        assert outcome.table.rows[0].cells == ("Invalid favorite selected",)
        assert navigator.state.selected_favorite is None
        assert navigator.focused_pane is Pane.FAVORITES

    def test_unknown_label_keeps_details_focus(self, navigator):
        navigator.dispatch(FavoriteConfirmed())

        navigator.dispatch(FavoriteHighlightChanged("NotARealFavorite"))

        assert navigator.focused_pane is Pane.DETAILS

    def test_unreadable_favorite(self, navigator):
        """Test a favorite whose directory is missing shows the error row."""
        outcome = navigator.dispatch(FavoriteHighlightChanged("Missing"))

        assert outcome.table.is_error
        assert navigator.state.selected_favorite == "Missing"

    def test_refresh_rereads_selected_favorite(self, navigator, sample_dir):
        navigator.dispatch(FavoriteHighlightChanged("Sample"))
        (sample_dir / "new.txt").write_text("x")

        outcome = navigator.refresh()

        assert len(outcome.table.data_rows) == 3

    def test_refresh_without_selection(self, navigator):
        outcome = navigator.refresh()
        assert outcome.table is None


class TestFocusTransitions:
    """Test moving focus between panes."""

    def test_confirm_moves_to_details(self, navigator):
        navigator.dispatch(FavoriteHighlightChanged("Sample"))
        table = navigator.table

        outcome = navigator.dispatch(FavoriteConfirmed())

        assert outcome.focused_pane is Pane.DETAILS
        assert outcome.table is None
        assert navigator.table is table

    def test_cancel_returns_to_favorites(self, navigator):
        navigator.dispatch(FavoriteConfirmed())

        outcome = navigator.dispatch(CancelRequested())

        assert outcome.focused_pane is Pane.FAVORITES

    def test_cancel_in_favorites_is_noop(self, navigator):
        outcome = navigator.dispatch(CancelRequested())

        assert outcome.focused_pane is Pane.FAVORITES
        assert outcome.table is None

    def test_confirm_in_details_is_noop(self, navigator):
        navigator.dispatch(FavoriteConfirmed())

        outcome = navigator.dispatch(FavoriteConfirmed())

        assert outcome.focused_pane is Pane.DETAILS

    def test_round_trip(self, navigator):
        panes = [
            navigator.dispatch(event).focused_pane
            for event in (FavoriteConfirmed(), CancelRequested(), CancelRequested())
        ]
        assert panes == [Pane.DETAILS, Pane.FAVORITES, Pane.FAVORITES]


class TestRowConfirmed:
    """Test reporting selected items."""

    def test_reports_first_column(self, navigator, selections):
        """Test the trimmed name is reported and state is unchanged."""
        navigator.dispatch(FavoriteHighlightChanged("Sample"))
        navigator.dispatch(FavoriteConfirmed())

        outcome = navigator.dispatch(DetailRowConfirmed(2))

        assert outcome.selected_item == "sub"
        assert outcome.table is None
        assert selections == ["sub"]
        assert navigator.focused_pane is Pane.DETAILS
        assert navigator.state.selected_favorite == "Sample"

    def test_ignored_in_favorites_pane(self, navigator, selections):
        navigator.dispatch(FavoriteHighlightChanged("Sample"))

        outcome = navigator.dispatch(DetailRowConfirmed(1))

        assert outcome.selected_item is None
        assert selections == []

    def test_header_row_reports_nothing(self, navigator, selections):
        navigator.dispatch(FavoriteHighlightChanged("Sample"))
        navigator.dispatch(FavoriteConfirmed())

        outcome = navigator.dispatch(DetailRowConfirmed(0))

        assert outcome.selected_item is None
        assert selections == []

    def test_error_row_reports_nothing(self, navigator, selections):
        navigator.dispatch(FavoriteHighlightChanged("Missing"))
        navigator.dispatch(FavoriteConfirmed())

        outcome = navigator.dispatch(DetailRowConfirmed(1))

        assert outcome.selected_item is None
        assert selections == []

    def test_out_of_range_row(self, navigator):
        navigator.dispatch(FavoriteHighlightChanged("Sample"))
        navigator.dispatch(FavoriteConfirmed())

        assert navigator.dispatch(DetailRowConfirmed(99)).selected_item is None
        assert navigator.dispatch(DetailRowConfirmed(-1)).selected_item is None

    def test_without_callback(self, favorites, projector):
        navigator = NavigationStateMachine(favorites, projector)
        navigator.dispatch(FavoriteHighlightChanged("Sample"))
        navigator.dispatch(FavoriteConfirmed())

        assert navigator.dispatch(DetailRowConfirmed(1)).selected_item == "a.txt"


class TestUnknownEvents:
    """Test dispatch is total."""

    def test_unknown_event_is_ignored(self, navigator):
        outcome = navigator.dispatch("not an event")

        assert outcome.focused_pane is Pane.FAVORITES
        assert outcome.table is None
