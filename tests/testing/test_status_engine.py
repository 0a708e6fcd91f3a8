"""Tests for matching tokens against a Document and building reports."""

import pytest


class TestScenario:
    """Validates REQ-3.3: requirement status from test output."""

    def test_REQ_3_3_pass_fail_unknown(self, scenario_document):
        from reqdoc.testing.engine import check_document
        from reqdoc.testing.status import TestStatus

        log = "REQ-1.1: passed\nREQ-1.2: failed\nREQ-9.9: passed\n"
        report = check_document(scenario_document, log)

        assert report.requirement_status("REQ-1.1") is TestStatus.PASSED
        assert report.requirement_status("REQ-1.2") is TestStatus.FAILED
        assert report.topic_status("TOPIC-1") is TestStatus.FAILED
        assert report.unmatched == ["REQ-9.9: passed"]

    @pytest.mark.parametrize("log", [
        "REQ-1.1: passed\nREQ-1.1: failed\n",
        "REQ-1.1: failed\nREQ-1.1: passed\n",
    ])
    def test_conflicting_in_either_order(self, scenario_document, log):
        from reqdoc.testing.engine import check_document
        from reqdoc.testing.status import TestStatus

        report = check_document(scenario_document, log)
        assert report.requirement_status("REQ-1.1") is TestStatus.CONFLICTING
        assert report.topic_status("TOPIC-1") is TestStatus.CONFLICTING

    def test_repeated_pass_stays_passed(self, scenario_document):
        from reqdoc.testing.engine import check_document
        from reqdoc.testing.status import TestStatus

        report = check_document(scenario_document, "REQ-1.1: passed\n" * 3)
        assert report.requirement_status("REQ-1.1") is TestStatus.PASSED
        assert report.requirements["REQ-1.1"].observations == 3

    def test_unmentioned_is_not_tested(self, scenario_document):
        from reqdoc.testing.engine import check_document
        from reqdoc.testing.status import TestStatus

        report = check_document(scenario_document, "REQ-1.1: passed")
        assert report.requirement_status("REQ-1.2") is TestStatus.NOT_TESTED
        assert report.topic_status("TOPIC-1") is TestStatus.NOT_TESTED
        assert not report.all_passed

    def test_irrelevant_text_never_fails(self, scenario_document):
        from reqdoc.testing.engine import check_document

        report = check_document(scenario_document, "\x00 garbage :: REQ- : passed ☃\n" * 10)
        assert report.unmatched == []

    def test_unmatched_deduplicated_in_order(self, scenario_document):
        from reqdoc.testing.engine import check_document

        log = "REQ-9.9: passed\nREQ-8.8: failed\nREQ-9.9: passed\nREQ-9.9: failed\n"
        report = check_document(scenario_document, log)
        assert report.unmatched == ["REQ-9.9: passed", "REQ-8.8: failed", "REQ-9.9: failed"]


class TestMultipleLogs:
    def test_logs_merged_into_one_report(self, scenario_document):
        from reqdoc.testing.engine import StatusEngine
        from reqdoc.testing.status import TestStatus

        engine = StatusEngine(scenario_document)
        engine.scan("REQ-1.1: passed")
        engine.scan("REQ-1.2: passed\nREQ-1.1: failed")
        report = engine.report()
        assert report.requirement_status("REQ-1.1") is TestStatus.CONFLICTING
        assert report.requirement_status("REQ-1.2") is TestStatus.PASSED

    def test_report_is_a_snapshot(self, scenario_document):
        from reqdoc.testing.engine import StatusEngine
        from reqdoc.testing.status import TestStatus

        engine = StatusEngine(scenario_document)
        engine.scan("REQ-1.1: passed")
        first = engine.report()
        engine.scan("REQ-1.1: failed")
        assert first.requirement_status("REQ-1.1") is TestStatus.PASSED
        assert engine.report().requirement_status("REQ-1.1") is TestStatus.CONFLICTING


class TestHierarchy:
    def test_subtopic_rollup(self, sample_document):
        from reqdoc.testing.engine import check_document
        from reqdoc.testing.status import TestStatus

        report = check_document(sample_document, "REQ-2.1: passed\nREQ-2.2: failed - broken\n")
        assert report.topic_status("TOPIC-2.1") is TestStatus.FAILED
        assert report.topic_status("TOPIC-2") is TestStatus.FAILED
        assert report.topic_status("TOPIC-1") is TestStatus.NOT_TESTED
        assert report.status is TestStatus.FAILED

    def test_topics_reported_in_walk_order(self, sample_document):
        from reqdoc.testing.engine import check_document

        report = check_document(sample_document, "")
        assert list(report.topics) == ["TOPIC-1", "TOPIC-2", "TOPIC-2.1"]

    def test_all_passed(self, sample_document):
        from reqdoc.testing.engine import check_document

        log = "\n".join(f"{rid}: passed" for rid in ["REQ-1.1", "REQ-1.2", "REQ-2.1", "REQ-2.2"])
        report = check_document(sample_document, log)
        assert report.all_passed
        assert report.counts()[report.status] == 4


class TestSelection:
    def test_unselected_requirements_not_reported(self, sample_document):
        from reqdoc.testing.config import CheckConfig
        from reqdoc.testing.engine import check_document

        check = CheckConfig(allowed_requirements=[r"REQ-2\."])
        report = check_document(sample_document, "REQ-1.1: passed\nREQ-2.2: passed", check=check)
        assert list(report.requirements) == ["REQ-2.1", "REQ-2.2"]
        # Known but unselected IDs are neither reported nor unmatched.
        assert report.unmatched == []

    def test_topics_without_selected_requirements_omitted(self, sample_document):
        from reqdoc.testing.config import CheckConfig
        from reqdoc.testing.engine import check_document

        check = CheckConfig(allowed_requirements=[r"REQ-2\.2"])
        report = check_document(sample_document, "", check=check)
        assert list(report.topics) == ["TOPIC-2", "TOPIC-2.1"]

    def test_several_selection_patterns(self, sample_document):
        from reqdoc.testing.config import CheckConfig
        from reqdoc.testing.engine import check_document

        check = CheckConfig(allowed_requirements=[r"REQ-1\.1$", r"REQ-2\.1"])
        report = check_document(sample_document, "", check=check)
        assert list(report.requirements) == ["REQ-1.1", "REQ-2.1"]

    def test_invalid_selection_regex(self, sample_document):
        from reqdoc.testing.config import CheckConfig
        from reqdoc.testing.engine import StatusEngine

        with pytest.raises(ValueError, match="invalid requirement selection"):
            StatusEngine(sample_document, check=CheckConfig(allowed_requirements=["REQ-("]))


class TestFailureDetails:
    def test_details_collected_for_failures(self, fixtures_dir, sample_document):
        from reqdoc.testing.engine import check_document
        from reqdoc.testing.status import TestStatus

        log = (fixtures_dir / "test_log.txt").read_text(encoding="utf-8")
        report = check_document(sample_document, log)
        result = report.requirements["REQ-1.2"]
        assert result.status is TestStatus.FAILED
        assert result.details == ["timeout after 30s", "assertion error"]
        assert report.requirements["REQ-1.1"].details == []
        assert report.unmatched == ["REQ-9.9: passed"]

    def test_to_dict(self, scenario_document):
        from reqdoc.testing.engine import check_document

        data = check_document(scenario_document, "REQ-1.1: passed\nREQ-1.2: failed - x").to_dict()
        assert data["status"] == "failed"
        assert data["counts"] == {"passed": 1, "failed": 1, "not tested": 0, "conflicting": 0}
        assert data["requirements"]["REQ-1.2"]["details"] == ["x"]
        assert data["topics"] == {"TOPIC-1": "failed"}
