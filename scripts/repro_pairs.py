import sys
from pathlib import Path

# Ensure we import the repo-local htmlworddiff (not a pip-installed one).
ROOT = Path(__file__).resolve().parents[1]
sys.path.insert(0, str(ROOT / "src"))

from htmlworddiff import HtmlDiff  # noqa: E402


def main():
    before = (
        '<p><b>CLINICAL INFORMATION:</b> Patient aged 0, gender not specified.</p>'
        '<p><b>FINDINGS:</b> The lung fields... The bone structures...</p>'
    )
    after = (
        '<p><b>CLINICAL INFORMATION:</b> Patient aged 50, male.</p>'
        '<p><b>FINDINGS:</b></p>'
        '<ul><li>The lung fields...</li><li>The bone structures...</li></ul>'
    )

    diff = HtmlDiff(before, after)
    changed = diff.compute_diff()
    counts = {}
    for op in diff.operations:
        counts[op.action] = counts.get(op.action, 0) + 1
    print("changed:", changed)
    print("operations:", counts)
    print(diff.build_diff_page())


if __name__ == "__main__":
    main()
