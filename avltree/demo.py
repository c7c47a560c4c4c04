"""
AVL Tree Demo -- Worked example, height growth against the AVL bound, the four
rotation cases, and balance behaviour under random insert/remove churn.

Generates:
- viz/*.png -- Individual visualization files
- report.pdf -- Comprehensive PDF report
"""

import time
from pathlib import Path
from typing import Dict, List, Optional, Tuple

import numpy as np
import matplotlib
matplotlib.use("Agg")
import matplotlib.pyplot as plt
from matplotlib.backends.backend_pdf import PdfPages

from avltree import balancing
from avltree.avl_tree import AVLTree
from avltree.node import Node

SEED = 42
np.random.seed(SEED)

VIZ_DIR = Path(__file__).parent / "viz"

COLORS = {
    "blue": "#3498db",
    "red": "#e74c3c",
    "orange": "#f39c12",
    "green": "#27ae60",
    "purple": "#9b59b6",
    "steel": "steelblue",
    "teal": "#1abc9c",
    "dark": "#2c3e50",
}

WORKED_VALUES = [5, 3, 8, 1, 4, 7, 9]
GROWTH_SIZES = [1, 2, 4, 8, 16, 32, 64, 128, 256, 512, 1024, 2048, 4096]
CHURN_STEPS = 5000
CHURN_KEY_RANGE = 2000


def _build(values) -> AVLTree[int]:
    tree: AVLTree[int] = AVLTree()
    for v in values:
        tree.insert(int(v))
    return tree


def _layout(root: Optional[Node]) -> Dict[int, Tuple[float, float, Node]]:
    """x from in-order rank, y from depth."""
    positions: Dict[int, Tuple[float, float, Node]] = {}
    rank = [0]

    def place(node: Optional[Node], depth: int) -> None:
        if node is None:
            return
        place(node.left, depth + 1)
        positions[id(node)] = (float(rank[0]), float(-depth), node)
        rank[0] += 1
        place(node.right, depth + 1)

    place(root, 0)
    return positions


def draw_tree(ax, root: Optional[Node], title: str, highlight=None) -> None:
    positions = _layout(root)
    for x, y, node in positions.values():
        for child in (node.left, node.right):
            if child is not None:
                cx, cy, _ = positions[id(child)]
                ax.plot([x, cx], [y, cy], color=COLORS["dark"], linewidth=1.2, zorder=1)
    for x, y, node in positions.values():
        color = COLORS["orange"] if node.value == highlight else COLORS["blue"]
        ax.scatter([x], [y], s=700, color=color, edgecolor="white", zorder=2)
        ax.text(x, y, str(node.value), ha="center", va="center",
                fontsize=10, color="white", fontweight="bold", zorder=3)
        ax.text(x, y - 0.32, f"h={node.height} bf={balancing.balance_factor(node)}",
                ha="center", va="top", fontsize=7, color=COLORS["dark"])
    ax.set_title(title, fontsize=10, fontweight="bold")
    ax.set_xlim(-1, max(len(positions), 1))
    ax.set_ylim(-(balancing.height(root) + 1.2), 0.8)
    ax.axis("off")


# ---------------------------------------------------------------------------
# Example 1: Worked Example
# ---------------------------------------------------------------------------
def example_1_worked_example():
    """Build from a fixed sequence, then remove a node with two children."""
    print("=" * 60)
    print("Example 1: Worked Example")
    print("=" * 60)

    tree = _build(WORKED_VALUES)
    print(f"\n  Inserted:     {WORKED_VALUES}")
    print(f"  Sorted:       {tree.traverse_sorted()}")
    print(f"  Height:       {tree.height()}")
    print("  Debug dump:")
    for line in tree.traverse_debug().splitlines():
        print(f"    {line}")

    before = tree.copy()
    tree.remove(5)
    root = tree.get_root()
    assert root is not None
    print(f"\n  After removing 5: {tree.traverse_sorted()}")
    print(f"  New root value:   {root.value} (smallest of the old right subtree)")
    assert tree.is_balanced() and tree.heights_valid()

    fig, axes = plt.subplots(1, 2, figsize=(14, 5))
    draw_tree(axes[0], before.get_root(), "Built from 5 3 8 1 4 7 9", highlight=5)
    draw_tree(axes[1], tree.get_root(), "After remove(5): successor 7 takes its place", highlight=7)
    fig.tight_layout()
    fig.savefig(VIZ_DIR / "01_worked_example.png", dpi=150, bbox_inches="tight")
    plt.close(fig)


# ---------------------------------------------------------------------------
# Example 2: Height Growth
# ---------------------------------------------------------------------------
def example_2_height_growth():
    """Compare observed heights with log2(n+1) and the 1.44*log2(n+2) AVL bound."""
    print("\n" + "=" * 60)
    print("Example 2: Height Growth")
    print("=" * 60)

    ns = np.array(GROWTH_SIZES)
    sorted_heights = []
    random_heights = []
    insert_times = []

    for n in ns:
        sorted_heights.append(_build(range(n)).height())

        values = np.random.permutation(n)
        start = time.perf_counter()
        tree = _build(values)
        insert_times.append((time.perf_counter() - start) / n * 1e6)
        random_heights.append(tree.height())

    lower = np.floor(np.log2(ns))
    bound = 1.44 * np.log2(ns + 2)

    print(f"\n  {'n':>6} {'sorted':>7} {'random':>7} {'floor(log2 n)':>14} {'1.44 log2(n+2)':>15}")
    for n, hs, hr, lo, b in zip(ns, sorted_heights, random_heights, lower, bound):
        print(f"  {n:>6} {hs:>7} {hr:>7} {int(lo):>14} {b:>15.2f}")

    assert all(h <= b for h, b in zip(sorted_heights, bound))
    assert all(h <= b for h, b in zip(random_heights, bound))

    fig, axes = plt.subplots(1, 2, figsize=(14, 5))
    axes[0].plot(ns, sorted_heights, "o-", color=COLORS["blue"], label="Sorted inserts")
    axes[0].plot(ns, random_heights, "s-", color=COLORS["green"], label="Random inserts")
    axes[0].plot(ns, lower, "--", color=COLORS["dark"], label="floor(log2 n) (perfect)")
    axes[0].plot(ns, bound, "--", color=COLORS["red"], label="1.44 log2(n+2) (AVL bound)")
    axes[0].set_xscale("log", base=2)
    axes[0].set_xlabel("n (distinct values)")
    axes[0].set_ylabel("Tree height (edges)")
    axes[0].set_title("Height stays logarithmic", fontsize=10, fontweight="bold")
    axes[0].legend(fontsize=9)
    axes[0].grid(True, alpha=0.3)

    axes[1].plot(ns, insert_times, "o-", color=COLORS["purple"])
    axes[1].set_xscale("log", base=2)
    axes[1].set_xlabel("n")
    axes[1].set_ylabel("Mean insert time (us)")
    axes[1].set_title("Insert cost grows like log n", fontsize=10, fontweight="bold")
    axes[1].grid(True, alpha=0.3)

    fig.tight_layout()
    fig.savefig(VIZ_DIR / "02_height_growth.png", dpi=150, bbox_inches="tight")
    plt.close(fig)


# ---------------------------------------------------------------------------
# Example 3: Rotation Cases
# ---------------------------------------------------------------------------
def example_3_rotation_cases():
    """The four three-node imbalances and the rotation each one triggers."""
    print("\n" + "=" * 60)
    print("Example 3: Rotation Cases")
    print("=" * 60)

    cases = [
        ("LL -> rotate right", [30, 20, 10]),
        ("RR -> rotate left", [10, 20, 30]),
        ("LR -> rotate left-right", [30, 10, 20]),
        ("RL -> rotate right-left", [10, 30, 20]),
    ]

    fig, axes = plt.subplots(1, 4, figsize=(16, 4))
    for ax, (name, values) in zip(axes, cases):
        tree = _build(values)
        print(f"\n  {name}: inserted {values}, pre-order {tree.pre_order()}")
        assert tree.pre_order() == [20, 10, 30]
        draw_tree(ax, tree.get_root(), f"{name}\ninsert {values}")

    fig.tight_layout()
    fig.savefig(VIZ_DIR / "03_rotation_cases.png", dpi=150, bbox_inches="tight")
    plt.close(fig)


# ---------------------------------------------------------------------------
# Example 4: Insert/Remove Churn
# ---------------------------------------------------------------------------
def _balance_factors(root: Optional[Node]) -> List[int]:
    factors: List[int] = []
    stack = [root] if root is not None else []
    while stack:
        node = stack.pop()
        factors.append(balancing.balance_factor(node))
        stack.extend(c for c in (node.left, node.right) if c is not None)
    return factors


def example_4_churn():
    """Random interleaved inserts and removes; invariants are checked at every step."""
    print("\n" + "=" * 60)
    print("Example 4: Insert/Remove Churn")
    print("=" * 60)

    tree: AVLTree[int] = AVLTree()
    keys = np.random.randint(0, CHURN_KEY_RANGE, size=CHURN_STEPS)
    ops = np.random.rand(CHURN_STEPS) < 0.6

    sizes = np.zeros(CHURN_STEPS, dtype=int)
    heights = np.zeros(CHURN_STEPS, dtype=int)
    counts = {"inserted": 0, "duplicate": 0, "removed": 0, "not_found": 0}

    for step, (key, is_insert) in enumerate(zip(keys, ops)):
        if is_insert:
            result = tree.insert(int(key))
        else:
            result = tree.remove(int(key))
        counts[result.value] += 1
        sizes[step] = tree.size()
        heights[step] = tree.height()
        if step % 500 == 0:
            assert tree.is_balanced() and tree.heights_valid() and tree.is_ordered()

    print(f"\n  Steps: {CHURN_STEPS}, outcomes: {counts}")
    print(f"  Final size: {tree.size()}, final height: {tree.height()}")

    factors = _balance_factors(tree.get_root())
    values, freq = np.unique(factors, return_counts=True)
    print(f"  Balance factors: {dict(zip(values.tolist(), freq.tolist()))}")
    assert set(values.tolist()) <= {-1, 0, 1}

    fig, axes = plt.subplots(1, 2, figsize=(14, 5))
    steps = np.arange(CHURN_STEPS)
    bound = 1.44 * np.log2(sizes + 2)
    axes[0].plot(steps, heights, color=COLORS["blue"], label="Height")
    axes[0].plot(steps, bound, "--", color=COLORS["red"], label="1.44 log2(size+2)")
    axes[0].set_xlabel("Operation")
    axes[0].set_ylabel("Height (edges)")
    axes[0].set_title("Height tracks the bound under churn", fontsize=10, fontweight="bold")
    axes[0].legend(fontsize=9)
    axes[0].grid(True, alpha=0.3)

    axes[1].bar(values, freq, color=COLORS["teal"], edgecolor="white")
    axes[1].set_xticks([-1, 0, 1])
    axes[1].set_xlabel("Balance factor")
    axes[1].set_ylabel("Nodes")
    axes[1].set_title("Final balance factors", fontsize=10, fontweight="bold")
    axes[1].grid(True, alpha=0.3, axis="y")

    fig.tight_layout()
    fig.savefig(VIZ_DIR / "04_churn.png", dpi=150, bbox_inches="tight")
    plt.close(fig)

    tree.destroy()


# ---------------------------------------------------------------------------
# PDF Report
# ---------------------------------------------------------------------------
def generate_pdf_report():
    """Collect the saved figures into a single PDF."""
    print("\n" + "=" * 60)
    print("Generating PDF report")
    print("=" * 60)

    report_path = Path(__file__).parent / "report.pdf"
    viz_files = sorted(VIZ_DIR.glob("*.png"))

    with PdfPages(str(report_path)) as pdf:
        fig = plt.figure(figsize=(11, 8.5))
        ax = fig.add_axes([0, 0, 1, 1])
        ax.axis("off")
        ax.text(0.5, 0.9, "AVL Tree", fontsize=24, ha="center", fontweight="bold",
                transform=ax.transAxes)
        summary_items = [
            "Invariant: |height(left) - height(right)| <= 1 at every node.",
            "Heights are cached; a missing child counts as -1, so a leaf has height 0.",
            "",
            "After each insert/remove the recursion unwinds, recomputing heights.",
            "A node with |balance| > 1 is rotated:",
            "  left heavy,  left child leans right  -> rotate left-right",
            "  left heavy,  otherwise               -> rotate right",
            "  right heavy, right child leans left  -> rotate right-left",
            "  right heavy, otherwise               -> rotate left",
            "",
            "Height is bounded by 1.44 log2(n+2), so search, insert and",
            "remove are O(log n) in the worst case.",
        ]
        ax.text(0.08, 0.78, "\n".join(summary_items), fontsize=11, ha="left", va="top",
                transform=ax.transAxes, family="monospace", linespacing=1.4)
        pdf.savefig(fig)
        plt.close(fig)

        titles = {
            "01_worked_example.png": "Example 1: Worked Example",
            "02_height_growth.png": "Example 2: Height Growth",
            "03_rotation_cases.png": "Example 3: Rotation Cases",
            "04_churn.png": "Example 4: Insert/Remove Churn",
        }

        for viz_file in viz_files:
            fig = plt.figure(figsize=(11, 8.5))
            title = titles.get(viz_file.name, viz_file.stem.replace("_", " ").title())
            fig.suptitle(title, fontsize=14, fontweight="bold", y=0.98)

            img = plt.imread(str(viz_file))
            ax = fig.add_axes([0.02, 0.02, 0.96, 0.92])
            ax.imshow(img)
            ax.axis("off")

            pdf.savefig(fig)
            plt.close(fig)

    print(f"  Report saved: report.pdf ({len(viz_files) + 1} pages)")


# ---------------------------------------------------------------------------
# Main
# ---------------------------------------------------------------------------
def main():
    print("AVL Tree Demo")
    print("=" * 60)
    print(f"Seed: {SEED}")
    print()

    VIZ_DIR.mkdir(exist_ok=True)

    example_1_worked_example()
    example_2_height_growth()
    example_3_rotation_cases()
    example_4_churn()
    generate_pdf_report()

    print("\n" + "=" * 60)
    print("All examples completed successfully.")
    print(f"Visualizations: {VIZ_DIR}/")
    print(f"Report: {Path(__file__).parent / 'report.pdf'}")
    print("=" * 60)


if __name__ == "__main__":
    main()
