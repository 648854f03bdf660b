"""Revenue Chart — y-axis scale for the monthly revenue bar chart.

Invariants:
    - Labels step by $1K from top_label down to $0K
    - top_label is the highest monthly revenue rounded up to the next thousand
    - Empty revenue yields a single "$0K" label and top_label 0
"""

import math


def generate_y_axis(revenue: list[dict]) -> tuple[list[str], int]:
    """Return (labels, top_label) for revenue rows shaped {month, revenue}."""
    highest = max((row["revenue"] for row in revenue), default=0)
    top_label = math.ceil(highest / 1000) * 1000
    labels = [f"${i // 1000}K" for i in range(top_label, -1, -1000)]
    return labels, top_label
