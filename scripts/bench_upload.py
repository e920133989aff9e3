#!/usr/bin/env python3
"""Benchmark PDF ingestion: latency per upload and server-side processing time.

Usage:
  API on localhost:
    export API_URL=http://localhost:3000
    python scripts/bench_upload.py path/to/document.pdf [--num-uploads 10]
"""
from __future__ import annotations

import argparse
import os
import statistics
import sys
import time
from pathlib import Path

import httpx


def upload_once(client: httpx.Client, api_url: str, pdf: Path, data: bytes) -> httpx.Response:
    return client.post(
        f"{api_url}/api/upload",
        files={"file": (pdf.name, data, "application/pdf")},
    )


def main() -> int:
    parser = argparse.ArgumentParser(description="Benchmark PDF upload and ingestion")
    parser.add_argument("pdf", type=Path, help="PDF file to upload")
    parser.add_argument("--num-uploads", type=int, default=5, help="Number of uploads")
    parser.add_argument("--output", type=str, default="", help="Optional summary output file")
    args = parser.parse_args()

    api_url = os.environ.get("API_URL", "http://localhost:3000").rstrip("/")
    data = args.pdf.read_bytes()

    with httpx.Client(timeout=10.0) as client:
        r = client.get(f"{api_url}/health")
        r.raise_for_status()

    latencies: list[float] = []
    server_ms: list[int] = []
    chunks = 0
    errors = 0

    print(f"Uploading {args.pdf.name} {args.num_uploads} times ({len(data)} bytes)...")
    start_total = time.perf_counter()
    with httpx.Client(timeout=600.0) as client:
        for _ in range(args.num_uploads):
            t0 = time.perf_counter()
            r = upload_once(client, api_url, args.pdf, data)
            elapsed = time.perf_counter() - t0
            if r.status_code == 200:
                latencies.append(elapsed)
                body = r.json()["data"]
                server_ms.append(body["processingTimeMs"])
                chunks = body["chunksProcessed"]
            else:
                errors += 1
                print(f"  {r.status_code}: {r.text}")
    total_elapsed = time.perf_counter() - start_total

    n = len(latencies)
    if n == 0:
        print("No successful uploads.")
        return 1

    p50 = statistics.median(latencies) * 1000
    p95 = sorted(latencies)[max(int(n * 0.95) - 1, 0)] * 1000 if n >= 20 else p50
    summary = (
        f"Upload benchmark (n={n}, errors={errors}, chunks/upload={chunks})\n"
        f"  Latency: p50={p50:.1f} ms, p95={p95:.1f} ms\n"
        f"  Server processing: median={statistics.median(server_ms):.0f} ms\n"
        f"  Chunks/s: {n * chunks / total_elapsed:.2f}\n"
        f"  Total time: {total_elapsed:.2f} s\n"
    )
    print(summary)

    if args.output:
        try:
            os.makedirs(os.path.dirname(args.output) or ".", exist_ok=True)
            with open(args.output, "w", encoding="utf-8") as f:
                f.write(summary)
            print(f"Wrote {args.output}")
        except OSError as e:
            print(f"Could not write {args.output}: {e}", file=sys.stderr)

    return 0


if __name__ == "__main__":
    sys.exit(main())
