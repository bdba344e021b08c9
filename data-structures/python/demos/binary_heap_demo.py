"""
Binary Heap Demo -- Insertion trace, bulk heapify cost, heapsort, and heap shape.

Generates:
- viz/*.png -- Individual visualization files
- report.pdf -- Summary PDF report
"""

import sys
import time
from pathlib import Path

import numpy as np
import matplotlib
matplotlib.use("Agg")
import matplotlib.pyplot as plt
from matplotlib.backends.backend_pdf import PdfPages

sys.path.insert(0, str(Path(__file__).resolve().parents[1] / "src"))
from binary_heap import BinaryHeap, HeapOrder

SEED = 42
np.random.seed(SEED)

VIZ_DIR = Path(__file__).parent / "viz"
VIZ_DIR.mkdir(exist_ok=True)

COLORS = {
    "blue": "#3498db",
    "red": "#e74c3c",
    "orange": "#f39c12",
    "green": "#27ae60",
    "purple": "#9b59b6",
    "dark": "#2c3e50",
}

TRACE_VALUES = [10, 11, 9, 5, 6]
BENCH_SIZES = [2 ** k for k in range(4, 15)]
SORT_SIZES = [1000, 5000, 10000, 50000, 100000]


class _Counted:
    """Wraps a value and counts every ordering comparison made on it."""

    comparisons = 0

    def __init__(self, value):
        self.value = value

    def __lt__(self, other):
        _Counted.comparisons += 1
        return self.value < other.value

    def __gt__(self, other):
        _Counted.comparisons += 1
        return self.value > other.value


def _node_positions(n):
    positions = []
    for i in range(n):
        level = int(np.floor(np.log2(i + 1)))
        offset = i + 1 - 2 ** level
        x = (offset + 0.5) / 2 ** level
        positions.append((x, -level))
    return positions


def _draw_tree(ax, values, highlight=None, title=""):
    positions = _node_positions(len(values))
    for i in range(1, len(values)):
        px, py = positions[(i - 1) // 2]
        cx, cy = positions[i]
        ax.plot([px, cx], [py, cy], color=COLORS["dark"], linewidth=1, zorder=1)
    for i, (x, y) in enumerate(positions):
        color = COLORS["orange"] if i == highlight else COLORS["blue"]
        ax.scatter([x], [y], s=900, color=color, edgecolor="white", zorder=2)
        ax.text(x, y, str(values[i]), ha="center", va="center",
                fontsize=10, fontweight="bold", color="white", zorder=3)
    ax.set_xlim(-0.05, 1.05)
    ax.set_ylim(-3.6, 0.6)
    ax.set_title(title, fontsize=10, fontweight="bold")
    ax.axis("off")


# ---------------------------------------------------------------------------
# Example 1: Insertion Trace
# ---------------------------------------------------------------------------
def example_1_insertion_trace():
    """Insert values one at a time into a min-heap and draw each state."""
    print("=" * 60)
    print("Example 1: Insertion Trace")
    print("=" * 60)

    heap = BinaryHeap(HeapOrder.MIN)
    states = []
    for value in TRACE_VALUES:
        heap.insert(value)
        snapshot = heap.raw()
        states.append((value, snapshot))
        print(f"  insert({value:>2}) -> {snapshot}")

    drained = heap.collect_all_sorted()
    print(f"\n  Drained: {drained}")

    fig, axes = plt.subplots(1, len(states), figsize=(4 * len(states), 4))
    for ax, (value, snapshot) in zip(axes, states):
        _draw_tree(ax, snapshot, highlight=snapshot.index(value),
                   title=f"insert({value})\n{snapshot}")
    fig.suptitle("Min-Heap Insertion: append then sift up",
                 fontsize=14, fontweight="bold")
    fig.tight_layout()
    fig.savefig(VIZ_DIR / "01_insertion_trace.png", dpi=150, bbox_inches="tight")
    plt.close(fig)
    print(f"\n  Saved: viz/01_insertion_trace.png")
    return states, drained


# ---------------------------------------------------------------------------
# Example 2: Bulk Heapify vs Repeated Insertion
# ---------------------------------------------------------------------------
def example_2_build_cost():
    """Count comparisons for from_list versus n inserts of the worst-case input."""
    print("\n" + "=" * 60)
    print("Example 2: Bulk Heapify vs Repeated Insertion")
    print("=" * 60)

    bulk_counts = []
    insert_counts = []
    for n in BENCH_SIZES:
        # Ascending input into a max-heap makes every insert sift to the root.
        values = np.arange(n).tolist()

        _Counted.comparisons = 0
        BinaryHeap.from_list([_Counted(v) for v in values], HeapOrder.MAX)
        bulk_counts.append(_Counted.comparisons)

        _Counted.comparisons = 0
        heap = BinaryHeap(HeapOrder.MAX)
        for v in values:
            heap.insert(_Counted(v))
        insert_counts.append(_Counted.comparisons)

        print(f"  n={n:>6}: from_list={bulk_counts[-1]:>8}  inserts={insert_counts[-1]:>8}")

    sizes = np.array(BENCH_SIZES, dtype=float)
    bulk = np.array(bulk_counts, dtype=float)
    inserts = np.array(insert_counts, dtype=float)

    fig, axes = plt.subplots(1, 2, figsize=(14, 5.5))
    axes[0].loglog(sizes, bulk, "o-", color=COLORS["green"], label="from_list (bottom-up)")
    axes[0].loglog(sizes, inserts, "s-", color=COLORS["red"], label="n x insert")
    axes[0].loglog(sizes, 2 * sizes, "--", color=COLORS["dark"], alpha=0.6, label="2n")
    axes[0].loglog(sizes, sizes * np.log2(sizes), ":", color=COLORS["dark"], alpha=0.6,
                   label="n log2 n")
    axes[0].set_xlabel("n")
    axes[0].set_ylabel("Comparisons")
    axes[0].set_title("Comparisons to Build a Max-Heap from Ascending Input",
                      fontsize=10, fontweight="bold")
    axes[0].legend(fontsize=9)
    axes[0].grid(True, alpha=0.3, which="both")

    axes[1].semilogx(sizes, bulk / sizes, "o-", color=COLORS["green"], label="from_list / n")
    axes[1].semilogx(sizes, inserts / sizes, "s-", color=COLORS["red"], label="inserts / n")
    axes[1].set_xlabel("n")
    axes[1].set_ylabel("Comparisons per element")
    axes[1].set_title("Per-Element Cost\nflat for bulk heapify, growing as log n for inserts",
                      fontsize=10, fontweight="bold")
    axes[1].legend(fontsize=9)
    axes[1].grid(True, alpha=0.3)

    fig.tight_layout()
    fig.savefig(VIZ_DIR / "02_build_cost.png", dpi=150, bbox_inches="tight")
    plt.close(fig)
    print(f"\n  Saved: viz/02_build_cost.png")
    return bulk_counts, insert_counts


# ---------------------------------------------------------------------------
# Example 3: Heapsort via collect_all_sorted
# ---------------------------------------------------------------------------
def example_3_heapsort():
    """Drain min and max heaps, check the output, and time it against sorted()."""
    print("\n" + "=" * 60)
    print("Example 3: Heapsort via collect_all_sorted")
    print("=" * 60)

    heap_times = []
    builtin_times = []
    for n in SORT_SIZES:
        values = np.random.randint(-10 * n, 10 * n, size=n).tolist()

        start = time.perf_counter()
        ascending = BinaryHeap.from_list(list(values), HeapOrder.MIN).collect_all_sorted()
        heap_times.append(time.perf_counter() - start)

        start = time.perf_counter()
        expected = sorted(values)
        builtin_times.append(time.perf_counter() - start)

        descending = BinaryHeap.from_list(list(values), HeapOrder.MAX).collect_all_sorted()
        ok = ascending == expected and descending == expected[::-1]
        print(f"  n={n:>6}: heap={heap_times[-1] * 1e3:8.2f} ms  "
              f"sorted()={builtin_times[-1] * 1e3:7.2f} ms  matches={ok}")

    fig, ax = plt.subplots(figsize=(8, 5))
    ax.loglog(SORT_SIZES, np.array(heap_times) * 1e3, "o-", color=COLORS["purple"],
              label="BinaryHeap.from_list + collect_all_sorted")
    ax.loglog(SORT_SIZES, np.array(builtin_times) * 1e3, "s-", color=COLORS["blue"],
              label="sorted()")
    ax.set_xlabel("n")
    ax.set_ylabel("Time (ms)")
    ax.set_title("Heapsort Wall Time", fontsize=11, fontweight="bold")
    ax.legend(fontsize=9)
    ax.grid(True, alpha=0.3, which="both")
    fig.tight_layout()
    fig.savefig(VIZ_DIR / "03_heapsort.png", dpi=150, bbox_inches="tight")
    plt.close(fig)
    print(f"\n  Saved: viz/03_heapsort.png")
    return heap_times, builtin_times


# ---------------------------------------------------------------------------
# Example 4: Heap Shape
# ---------------------------------------------------------------------------
def example_4_heap_shape():
    """Show the level layout of a max-heap built from a shuffled range."""
    print("\n" + "=" * 60)
    print("Example 4: Heap Shape")
    print("=" * 60)

    values = np.random.permutation(15).tolist()
    print(f"  Input:    {values}")
    heap = BinaryHeap.from_list(list(values), HeapOrder.MAX)
    layout = heap.raw()
    print(f"  Heapified: {layout}")
    print(f"  Root: {heap.root()}  valid heap: {heap.is_heap()}")

    fig, axes = plt.subplots(1, 2, figsize=(14, 4.5))
    _draw_tree(axes[0], values, title="Input list read as a complete tree")
    _draw_tree(axes[1], layout, highlight=0, title="After bottom-up heapify (max)")
    fig.tight_layout()
    fig.savefig(VIZ_DIR / "04_heap_shape.png", dpi=150, bbox_inches="tight")
    plt.close(fig)
    print(f"\n  Saved: viz/04_heap_shape.png")
    return layout


# ---------------------------------------------------------------------------
# PDF Report
# ---------------------------------------------------------------------------
def generate_pdf_report():
    print("\n" + "=" * 60)
    print("Generating PDF Report")
    print("=" * 60)

    report_path = Path(__file__).parent / "report.pdf"
    viz_files = sorted(VIZ_DIR.glob("*.png"))

    with PdfPages(report_path) as pdf:
        fig, ax = plt.subplots(figsize=(11, 8.5))
        ax.axis("off")
        ax.text(0.5, 0.94, "Binary Heap", fontsize=22, fontweight="bold",
                ha="center", va="top", transform=ax.transAxes)
        summary_items = [
            "1. Insertion appends to the end of the list and sifts the new element up",
            "   while it outranks its parent at (i - 1) // 2.",
            "",
            "2. extract_root swaps the root with the last element, pops it, and sifts",
            "   the new root down, keeping the tree complete.",
            "",
            "3. from_list sifts down every internal node from len // 2 - 1 to 0.",
            "   Most nodes sit near the leaves, so the total work is O(n) rather than",
            "   the O(n log n) of inserting one element at a time.",
            "",
            "4. collect_all_sorted drains the heap in priority order: ascending for a",
            "   min-heap, descending for a max-heap.",
        ]
        ax.text(0.06, 0.84, "\n".join(summary_items), fontsize=11, ha="left", va="top",
                transform=ax.transAxes, family="monospace", linespacing=1.4)
        pdf.savefig(fig)
        plt.close(fig)

        titles = {
            "01_insertion_trace.png": "Example 1: Insertion Trace",
            "02_build_cost.png": "Example 2: Bulk Heapify vs Repeated Insertion",
            "03_heapsort.png": "Example 3: Heapsort",
            "04_heap_shape.png": "Example 4: Heap Shape",
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
    print("Binary Heap Demo")
    print("=" * 60)
    print(f"Seed: {SEED}")
    print()

    example_1_insertion_trace()
    example_2_build_cost()
    example_3_heapsort()
    example_4_heap_shape()
    generate_pdf_report()

    print("\n" + "=" * 60)
    print("All examples completed successfully.")
    print(f"Visualizations: {VIZ_DIR}/")
    print(f"Report: {Path(__file__).parent / 'report.pdf'}")
    print("=" * 60)


if __name__ == "__main__":
    main()
