"""Grading and human-readable report formatting for validation results."""


def compute_grade(issues: list, warnings: list) -> str:
    """Compute article grade from issues and warnings.

    A+ = no issues, no warnings
    A  = no issues, some warnings
    B  = 1 issue
    C  = 2 issues
    D  = 3+ issues
    """
    if not issues and not warnings:
        return "A+"
    if not issues:
        return "A"
    if len(issues) == 1:
        return "B"
    if len(issues) == 2:
        return "C"
    return "D"


def format_validation_report(results: dict, keyword: str) -> str:
    """Format validation results as a readable CLI report."""

    def _status(ok: bool) -> str:
        return "PASS" if ok else "FAIL"

    title = results["title_length"]
    meta = results["meta_length"]
    text = results["text_length"]
    h2 = results["h2_count"]
    kw = results["keyword_count"]

    lines = [
        f"{'='*60}",
        f"VALIDATION REPORT: {keyword}",
        f"{'='*60}",
        f"Grade: {results['grade']}",
        "",
        f"  [{_status(title['pass'])}] Title length:     {title['count']}  (max: 55)",
        f"  [{_status(meta['pass'])}] Meta description: {meta['count']}  (max: 150)",
        f"  [{_status(text['pass'])}] Text length:      {text['count']}  (min: 1500)",
        f"  [{_status(h2['pass'])}] H2 headers:       {h2['count']}  (target: 3-5)",
        f"  [{_status(kw['pass'])}] Keyword uses:     {kw['count']}  (target: 7-10)",
        f"  [{_status(results['no_emoji']['pass'])}] No emoji",
        f"  [{_status(results['no_markdown']['pass'])}] No Markdown residue",
        f"  [{_status(results['cta']['pass'])}] CTA block present once",
    ]

    if results["issues"]:
        lines.append(f"\nISSUES ({len(results['issues'])}):")
        for issue in results["issues"]:
            lines.append(f"  - {issue}")

    if results.get("warnings"):
        lines.append(f"\nWARNINGS ({len(results['warnings'])}):")
        for warning in results["warnings"]:
            lines.append(f"  ~ {warning}")

    if not results["issues"] and not results.get("warnings"):
        lines.append("\nAll checks passed!")

    lines.append(f"{'='*60}")
    return "\n".join(lines)
