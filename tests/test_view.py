"""Tests for text rendering of the picker."""

from recolor.config import RecolorConfig
from recolor.picker import Picker, PickerView
from recolor.picker.view import HELP_ACTIONS, HELP_EDITED, HELP_MOVE


class TestFormatChannels:
    """Tests for the channel column."""

    def test_active_channel_is_bracketed(self, picker: Picker) -> None:
        view = PickerView(picker, swatches=False)
        picker.open_cursor(["Normal"])
        assert view.format_channels("Normal") == "[fg]#c0c0c0█  bg #1a1a2e█"
        picker.cycle_channel()
        assert view.format_channels("Normal") == " fg #c0c0c0█ [bg]#1a1a2e█"

    def test_no_colors(self, picker: Picker) -> None:
        view = PickerView(picker, swatches=False)
        assert view.format_channels("Empty") == "(none)"

    def test_truecolor_swatch(self, picker: Picker) -> None:
        view = PickerView(picker)
        assert view.format_channels("Comment") == "[fg]#6a6a8a\x1b[38;2;106;106;138m█\x1b[0m"


class TestRender:
    """Tests for full renders per mode."""

    def test_closed(self, picker: Picker) -> None:
        assert PickerView(picker).render() == []

    def test_categories(self, picker: Picker) -> None:
        picker.open()
        lines = PickerView(picker, swatches=False).render()
        assert lines[:4] == [HELP_MOVE, HELP_ACTIONS, "", " Base UI"]
        assert lines[4] == " >  " + "Normal".ljust(26) + " [fg]#c0c0c0█  bg #1a1a2e█"
        assert lines[5] == "    " + "NormalFloat".ljust(26) + " (none)"
        assert " Treesitter" in lines

    def test_cursor_marks_tweaked_groups(self, picker: Picker) -> None:
        picker.open_cursor(["Normal", "Comment"])
        picker.move(1)
        picker.pick_direct("#7c7c9c")
        lines = PickerView(picker, swatches=False).render()
        assert lines[:5] == [HELP_MOVE, HELP_ACTIONS, "", " Groups at cursor", ""]
        assert lines[5] == "    " + "Normal".ljust(26) + " [fg]#c0c0c0█  bg #1a1a2e█"
        assert lines[6] == " > •" + "Comment".ljust(26) + " [fg]#7c7c9c█"

    def test_browse(self, picker: Picker) -> None:
        picker.open_browse()
        lines = PickerView(picker, swatches=False).render()
        assert lines[0] == " Search: (type to filter)_"
        assert lines[1] == " " + "-" * 96
        assert lines[2] == " >  " + "@comment".ljust(46) + " -> Comment"
        assert lines[-3] == " 1-8 of 8 groups"
        assert len(lines) == 2 + 8 + 4

    def test_browse_filtered(self, picker: Picker) -> None:
        picker.open_browse()
        for char in "com":
            picker.search_append(char)
        lines = PickerView(picker, swatches=False).render()
        assert lines[0] == " Search: com_"
        assert lines[-3] == " 1-2 of 2 (filtered from 8)"

    def test_browse_scrolls_with_selection(self, picker: Picker) -> None:
        picker.config = RecolorConfig(height=10)
        picker.open_browse()
        picker.move(4)
        lines = PickerView(picker, swatches=False).render()
        assert lines[-3] == " 3-5 of 8 groups"
        assert lines[4].startswith(" > ")

    def test_edited(self, picker: Picker) -> None:
        picker.open_cursor(["Visual"])
        picker.pick_direct("#444466")
        picker.open_edited()
        lines = PickerView(picker, swatches=False).render()
        assert lines == [
            " Edited Colors (demo)",
            "",
            HELP_MOVE,
            HELP_EDITED,
            "",
            " > •" + "Visual".ljust(26) + " [bg]#444466█",
            "",
            " 1 tweaked groups",
        ]
