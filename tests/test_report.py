"""Tests for alignment quality reporting."""

from scriptsync.core.models import AlignedWord
from scriptsync.core.report import AlignmentReport, build_alignment_report


class TestBuildAlignmentReport:
    def test_counts_word_kinds(self):
        words = [
            AlignedWord("a", 0, 100),
            AlignedWord("b", 200, 300, matched=False),
            AlignedWord("c", 300, 300, matched=False),
            AlignedWord("d", 300, 400),
        ]
        report = build_alignment_report(words)
        assert report.total_words == 4
        assert report.matched_words == 2
        assert report.interpolated_words == 1
        assert report.placeholder_words == 1
        assert report.match_rate == 50.0
        assert report.needs_review

    def test_flags_inverted_intervals(self):
        words = [AlignedWord("a", 0, 500), AlignedWord("b", 400, 300, matched=False)]
        report = build_alignment_report(words)
        assert report.inverted_intervals == 1
        assert "ends before it starts" in report.issues[0]

    def test_all_matched_is_good(self):
        report = build_alignment_report([AlignedWord("a", 0, 100)])
        assert report.is_good
        assert not report.issues

    def test_poor_match_rate_adds_issue(self):
        words = [AlignedWord(w, 0, 0, matched=False) for w in "abc"]
        report = build_alignment_report(words)
        assert report.is_poor
        assert any("Low match rate" in issue for issue in report.issues)

    def test_empty_alignment(self):
        report = build_alignment_report([])
        assert report.match_rate == 0.0
        assert report.issues == []


class TestAlignmentReportSummary:
    def test_summary_text(self):
        report = AlignmentReport(total_words=4, matched_words=3, interpolated_words=1)
        summary = report.summary()
        assert "Matched: 3/4 words (75%)" in summary
        assert "Interpolated: 1" in summary

    def test_summary_limits_issues(self):
        report = AlignmentReport(issues=[f"issue {i}" for i in range(5)])
        summary = report.summary()
        assert "Issues: 5" in summary
        assert "issue 2" in summary
        assert "issue 3" not in summary
