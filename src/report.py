'''
Tables, summaries and charts built from sequences of cars.
'''

from collections import Counter

import matplotlib.pyplot as plt
import pandas as pd

from config import CATEGORIES
from vehicle import insurance_estimate

TABLE_COLS = ["category", "make", "model", "year", "price"]


def format_price(value, symbol="$"):
    if isinstance(value, (int, float)):
        return f"{symbol}{value:,.0f}"
    return str(value)


def to_frame(cars):
    """One row per car, in the order given"""
    rows = []
    for car in cars:
        row = car.info()
        row["insurance"] = insurance_estimate(car)
        rows.append(row)
    df = pd.DataFrame(rows)
    if df.empty:
        return pd.DataFrame(columns=TABLE_COLS + ["insurance"])
    # Common columns first, variant columns after
    extra = [c for c in df.columns if c not in TABLE_COLS]
    return df[TABLE_COLS + extra]


def category_summary(cars):
    """Count and price statistics per category, in listing order"""
    df = to_frame(cars)
    cols = ["count", "average_price", "min_price", "max_price"]
    if df.empty:
        return pd.DataFrame(columns=cols)
    summary = df.groupby("category")["price"].agg(
        count="count", average_price="mean", min_price="min", max_price="max"
    )
    present = [c for c in CATEGORIES if c in summary.index]
    return summary.loc[present, cols]


def render_table(cars, symbol="$"):
    """Printable table of the main columns"""
    df = to_frame(cars)
    if df.empty:
        return "No cars in the catalog."
    df = df[TABLE_COLS].copy()
    df.index = range(1, len(df) + 1)
    df["price"] = df["price"].map(lambda p: format_price(p, symbol))
    return df.to_string()


def category_chart(cars):
    """Bar chart of how many cars each category holds"""
    counts = Counter(car.category for car in cars)
    fig, ax = plt.subplots(figsize=(7, 4))
    ax.bar(list(CATEGORIES), [counts.get(c, 0) for c in CATEGORIES], color="#1d4ed8")
    ax.set_title("Cars by category")
    ax.set_xlabel("Category")
    ax.set_ylabel("Count")
    fig.tight_layout()
    return fig
