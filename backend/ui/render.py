from html import escape
from typing import List

from models.analysis import AnalysisResult
from .state import ClaimSubmission, SubmissionState

PAGE_TEMPLATE = """<!DOCTYPE html>
<html lang="en">
<head>
  <meta charset="utf-8">
  <title>Truth Beacon</title>
  <style>
    body {{ font-family: system-ui, sans-serif; background: #15162c; color: #fff; max-width: 56rem; margin: 0 auto; padding: 2rem; }}
    input[type=text] {{ width: 100%; height: 4rem; background: #2a2936; color: #fff; border: 1px solid transparent; border-radius: .5rem; padding: 0 1rem; }}
    button {{ width: 100%; margin-top: 1rem; padding: 1rem; border: 0; border-radius: 9999px; background: #FF6B3A; color: #fff; font-weight: 600; }}
    progress {{ width: 100%; height: 1rem; }}
    .badge {{ display: inline-block; padding: .25rem .75rem; border-radius: 9999px; border: 1px solid #3A82FF; color: #3A82FF; margin: 0 .5rem .5rem 0; }}
    .verdict {{ border-color: #FF6B3A; color: #FF6B3A; font-size: 1.25rem; }}
    .error {{ color: #ff8a8a; }}
  </style>
</head>
<body>
  <h1>Truth Beacon</h1>
  <p>Powered by Cerebras and Qwen 3 32B</p>
  <form method="post" action="/">
    <input type="text" name="claim" value="{claim}" placeholder="Enter suspicious claim..." required pattern=".*\\S.*">
    <button type="submit"{disabled}>{button_label}</button>
  </form>
{error}{result}{leaderboard}
</body>
</html>
"""


def render_result(result: AnalysisResult) -> str:
    probability = result.truth_probability
    explanation = result.explanation
    key_points = "\n".join(f"      <li>{escape(point)}</li>" for point in explanation.key_points)
    sources = "\n".join(f'      <span class="badge">{escape(src)}</span>' for src in explanation.sources)
    return (
        '  <section id="result">\n'
        '    <div class="probability">\n'
        f'      <progress value="{probability}" max="100"></progress>\n'
        f'      <span class="probability-value">{probability}%</span>\n'
        '    </div>\n'
        f'    <span class="badge verdict">{escape(explanation.verdict)}</span>\n'
        '    <h3>Key Evidence</h3>\n'
        '    <ol class="key-points">\n'
        f'{key_points}\n'
        '    </ol>\n'
        '    <h3>Sources</h3>\n'
        '    <div class="sources">\n'
        f'{sources}\n'
        '    </div>\n'
        '  </section>\n'
    )


def render_leaderboard(scores: List[int]) -> str:
    rows = "\n".join(f"      <li>{score}</li>" for score in scores)
    return (
        '  <section id="leaderboard">\n'
        '    <h3>Leaderboard</h3>\n'
        '    <ol>\n'
        f'{rows}\n'
        '    </ol>\n'
        '  </section>\n'
    )


def render_page(submission: ClaimSubmission, leaderboard: List[int]) -> str:
    submitting = submission.state is SubmissionState.SUBMITTING
    error = f'  <p class="error" role="alert">{escape(submission.error)}</p>\n' if submission.error else ""
    result = render_result(submission.result) if submission.result is not None else ""
    return PAGE_TEMPLATE.format(
        claim=escape(submission.claim, quote=True),
        disabled=" disabled" if submitting else "",
        button_label="Analyzing…" if submitting else "Analyze Claim",
        error=error,
        result=result,
        leaderboard=render_leaderboard(leaderboard),
    )
