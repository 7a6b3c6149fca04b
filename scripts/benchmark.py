#!/usr/bin/env python3
"""Benchmark script for the Books API.

Each iteration runs the full book lifecycle against a running server:
create, get, update, get, delete, and a final get that must return 404.
"""

import argparse
import statistics
import time

import httpx

SAMPLE_BOOK = {
    "title": "Dune",
    "author": "Frank Herbert",
    "genre": "Science Fiction",
    "copiesAvailable": 2,
}


def run_workflow(client: httpx.Client, base_url: str) -> None:
    """Run one create/get/update/delete cycle, raising on any unexpected status."""
    response = client.post(f"{base_url}/api/books", json=SAMPLE_BOOK)
    if response.status_code != 201:
        raise RuntimeError(f"create returned {response.status_code}")
    book_url = f"{base_url}/api/books/{response.json()['id']}"

    client.get(book_url).raise_for_status()

    updated = {**SAMPLE_BOOK, "copiesAvailable": SAMPLE_BOOK["copiesAvailable"] + 1}
    client.put(book_url, json=updated).raise_for_status()

    if client.get(book_url).json()["copiesAvailable"] != updated["copiesAvailable"]:
        raise RuntimeError("update was not applied")

    client.delete(book_url).raise_for_status()

    if client.get(book_url).status_code != 404:
        raise RuntimeError("deleted book is still readable")


def benchmark_books(base_url: str, num_requests: int) -> dict:
    """Run the workflow benchmark and return statistics."""
    latencies = []
    errors = 0

    print(f"Benchmarking {num_requests} workflows...")
    print()

    with httpx.Client(timeout=10.0) as client:
        for i in range(num_requests):
            try:
                start = time.perf_counter()
                run_workflow(client, base_url)
                elapsed = (time.perf_counter() - start) * 1000  # ms
                latencies.append(elapsed)
                print(f"  Workflow {i + 1}: {elapsed:.2f}ms")
            except (httpx.HTTPError, RuntimeError) as e:
                errors += 1
                print(f"  Workflow {i + 1}: ERROR ({e})")

    if not latencies:
        return {"error": "All workflows failed"}

    return {
        "total_requests": num_requests,
        "successful_requests": len(latencies),
        "failed_requests": errors,
        "latency_ms": {
            "min": min(latencies),
            "max": max(latencies),
            "mean": statistics.mean(latencies),
            "median": statistics.median(latencies),
            "stdev": statistics.stdev(latencies) if len(latencies) > 1 else 0,
            "p95": sorted(latencies)[int(len(latencies) * 0.95)],
        },
    }


def main():
    parser = argparse.ArgumentParser(description="Benchmark the Books API")
    parser.add_argument(
        "--url",
        default="http://localhost:8000",
        help="Base URL of the Books API",
    )
    parser.add_argument(
        "--requests",
        type=int,
        default=10,
        help="Number of workflows to run",
    )

    args = parser.parse_args()

    print("=" * 50)
    print("Books API Benchmark")
    print("=" * 50)
    print()

    results = benchmark_books(base_url=args.url, num_requests=args.requests)

    print()
    print("=" * 50)
    print("Results")
    print("=" * 50)
    print()

    if "error" in results:
        print(f"Error: {results['error']}")
        return

    print(f"Total workflows:     {results['total_requests']}")
    print(f"Successful:          {results['successful_requests']}")
    print(f"Failed:              {results['failed_requests']}")
    print()
    print("Latency (ms):")
    print(f"  Min:               {results['latency_ms']['min']:.2f}")
    print(f"  Max:               {results['latency_ms']['max']:.2f}")
    print(f"  Mean:              {results['latency_ms']['mean']:.2f}")
    print(f"  Median:            {results['latency_ms']['median']:.2f}")
    print(f"  Std Dev:           {results['latency_ms']['stdev']:.2f}")
    print(f"  P95:               {results['latency_ms']['p95']:.2f}")


if __name__ == "__main__":
    main()
