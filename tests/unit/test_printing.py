from typing import Any

import pytest

from deepread.extraction.validator import validate_and_build
from deepread.presenter.printing import PRINT_TABS, render_print


class TestRenderPrint:
    def test_tabs(self) -> None:
        assert PRINT_TABS == ("overview", "concepts", "visuals", "full-report")

    @pytest.mark.parametrize("tab", PRINT_TABS)
    def test_every_tab_starts_with_header(self, analysis_payload: dict[str, Any], tab: str) -> None:
        printed = render_print(validate_and_build(analysis_payload), tab)
        lines = printed.splitlines()
        assert lines[0] == "My Book: Part One"
        assert lines[1] == "by A. Writer"
        assert "An accessible tour of thermodynamics." in lines

    def test_default_tab_is_full_report(self, analysis_payload: dict[str, Any]) -> None:
        printed = render_print(validate_and_build(analysis_payload))
        assert printed.endswith(analysis_payload["fullMarkdownReport"] + "\n")

    def test_overview_lists_sections_in_order(self, analysis_payload: dict[str, Any]) -> None:
        printed = render_print(validate_and_build(analysis_payload), "overview")
        assert printed.index("SECTION 1") < printed.index("Heat") < printed.index("SECTION 2")
        assert "Key Insight: Heat is energy in transit." in printed

    def test_concepts_mark_high_impact(self, analysis_payload: dict[str, Any]) -> None:
        printed = render_print(validate_and_build(analysis_payload), "concepts")
        assert "Entropy (92 Impact) *" in printed
        assert "Enthalpy (60 Impact)\n" in printed

    def test_visuals_show_verbatim_values(self, analysis_payload: dict[str, Any]) -> None:
        printed = render_print(validate_and_build(analysis_payload), "visuals")
        assert "TOP THEMES" in printed
        assert "80%" in printed
        assert "CONCEPT IMPACT DISTRIBUTION" in printed

    def test_unknown_tab_raises(self, analysis_payload: dict[str, Any]) -> None:
        with pytest.raises(ValueError, match="Unknown tab"):
            render_print(validate_and_build(analysis_payload), "sidebar")
