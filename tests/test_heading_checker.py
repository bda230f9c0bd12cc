from heading_outline.checks.heading_checker import HeadingStructureChecker
from heading_outline.models.configs import CheckerConfig, FailurePolicy
from heading_outline.models.heading import HeadingDeclaration
from heading_outline.outline.errors import HeadingErrorCode


def _declarations(*pairs):
    return [HeadingDeclaration(text=text, level=level, position=idx) for idx, (text, level) in enumerate(pairs)]


def test_well_formed_document_passes():
    checker = HeadingStructureChecker(CheckerConfig(failure_policy=FailurePolicy.ABORT))

    report = checker.check(_declarations(("Doc", 1), ("A", 2), ("A.1", 3), ("B", 2)), document_id="doc")

    assert report.passed
    assert report.heading_count == 4
    assert report.accepted_count == 4
    assert report.active_heading.text == "B"
    assert [child.text for child in report.structure.children] == ["A", "B"]


def test_abort_policy_stops_at_first_issue():
    checker = HeadingStructureChecker(CheckerConfig(failure_policy=FailurePolicy.ABORT))

    report = checker.check(_declarations(("Doc", 1), ("Deep", 3), ("A", 2), ("Again", 1)))

    assert not report.passed
    assert [issue.code for issue in report.issues] == [HeadingErrorCode.UNREACHABLE_LEVEL]
    assert report.issues[0].position == 1
    assert report.heading_count == 2
    assert report.accepted_count == 1


def test_skip_policy_records_every_issue_and_continues():
    checker = HeadingStructureChecker(CheckerConfig(failure_policy=FailurePolicy.SKIP))

    report = checker.check(_declarations(("Doc", 1), ("Deep", 3), ("A", 2), ("Again", 1), ("A.1", 3)))

    assert [issue.code for issue in report.issues] == [
        HeadingErrorCode.UNREACHABLE_LEVEL,
        HeadingErrorCode.DUPLICATE_ROOT,
    ]
    assert report.heading_count == 5
    assert report.accepted_count == 3
    assert report.active_heading.text == "A.1"


def test_document_starting_below_level_one_keeps_tree_empty():
    checker = HeadingStructureChecker(CheckerConfig(failure_policy=FailurePolicy.SKIP))

    report = checker.check(_declarations(("Intro", 2), ("Details", 3)))

    assert [issue.code for issue in report.issues] == [
        HeadingErrorCode.FIRST_HEADING_NOT_LEVEL_ONE,
        HeadingErrorCode.FIRST_HEADING_NOT_LEVEL_ONE,
    ]
    assert report.structure is None
    assert report.active_heading is None


def test_document_without_headings_is_reported_empty():
    report = HeadingStructureChecker().check([], document_id="blank")

    assert [issue.code for issue in report.issues] == [HeadingErrorCode.EMPTY_TREE]
    assert report.to_dict()["passed"] is False


def test_structure_can_be_omitted_from_report():
    checker = HeadingStructureChecker(CheckerConfig(include_structure=False))

    report = checker.check(_declarations(("Doc", 1)))

    assert report.structure is None
    assert report.to_dict()["active_heading"] == {"text": "Doc", "level": 1}


def test_deep_outline_is_checked_without_failure():
    depth = 2000
    declarations = [HeadingDeclaration(text=f"H{level}", level=level, position=level - 1) for level in range(1, depth + 1)]

    report = HeadingStructureChecker(CheckerConfig(failure_policy=FailurePolicy.ABORT)).check(declarations)

    assert report.passed
    assert report.accepted_count == depth
    assert report.active_heading.level == depth
    payload = report.to_dict()["structure"]
    for _ in range(depth - 1):
        payload = payload["children"][0]
    assert payload == {"text": f"H{depth}", "level": depth, "children": []}
