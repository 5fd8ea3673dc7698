"""Benchmark degree reduction matrix construction.

Prints the reduction matrix for n=7, m=5 with endpoint interpolation
(r=s=1), then times construction of halving reductions (m = n // 2, r = s = 1)
across source degrees.
"""

import time

import torch

from torchbezier.degree_reduction import reduction_matrix


def print_reduction_matrix(n: int, m: int, r: int, s: int) -> None:
    """Print the reduction matrix tab-separated with four decimals."""
    out = torch.empty((m + 1) * (n + 1), dtype=torch.float64)
    reduction_matrix(n, m, r, s, out)

    for i in range(m + 1):
        row = out[i * (n + 1) : (i + 1) * (n + 1)]
        print("".join(f"{value:.4f}\t" for value in row.tolist()))


def benchmark_reduction_matrix(
    degree: int,
    n_iterations: int = 10,
    device: str = "cpu",
) -> float:
    """Benchmark construction of a halving reduction matrix.

    Parameters
    ----------
    degree : int
        Source degree n. The target degree is n // 2.
    n_iterations : int
        Number of iterations for timing.
    device : str
        Device to run on ('cpu' or 'cuda').

    Returns
    -------
    float
        Average time per construction in milliseconds.
    """
    m = degree // 2
    out = torch.empty(
        (m + 1) * (degree + 1), dtype=torch.float64, device=device
    )

    # Warmup
    for _ in range(2):
        reduction_matrix(degree, m, 1, 1, out)

    if device == "cuda":
        torch.cuda.synchronize()

    start = time.perf_counter()
    for _ in range(n_iterations):
        reduction_matrix(degree, m, 1, 1, out)

    if device == "cuda":
        torch.cuda.synchronize()

    elapsed = time.perf_counter() - start
    return elapsed / n_iterations * 1000  # ms


def main():
    """Print the reference matrix and run construction benchmarks."""
    print_reduction_matrix(7, 5, 1, 1)
    print()

    degrees = [8, 16, 24, 32, 48]

    print("Degree Reduction Matrix Benchmark (CPU)")
    print("=" * 40)
    print(f"{'Degree':>8} {'Time (ms)':>12}")
    print("-" * 40)

    for degree in degrees:
        elapsed = benchmark_reduction_matrix(degree)
        print(f"{degree:>8} {elapsed:>12.4f}")

    if torch.cuda.is_available():
        print()
        print("Degree Reduction Matrix Benchmark (CUDA)")
        print("=" * 40)
        for degree in degrees:
            elapsed = benchmark_reduction_matrix(degree, device="cuda")
            print(f"{degree:>8} {elapsed:>12.4f}")


if __name__ == "__main__":
    main()
