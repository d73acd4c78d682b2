"""
Report files for simulation runs.

A run produces two files that share a run id:
    run_<id>.csv            one row per game, guesses and verdicts spread
                            over fixed guess_i / verdict_i columns
    run_<id>_manifest.json  config, dictionary info, summary, git commit

Verdict cells carry a leading apostrophe ("'+*__+") so spreadsheets keep
them as text.
"""

from __future__ import annotations

import csv
import datetime as dt
import json
import subprocess
from pathlib import Path
from typing import Dict, Iterable, Iterator, List, Tuple

from wordler.engine import encode_verdict

BASE_COLUMNS = ["solver", "N", "answer", "success", "guesses", "invalid_guesses", "time_ms"]


def columns(max_turns: int) -> List[str]:
    cols = list(BASE_COLUMNS)
    for i in range(1, max_turns + 1):
        cols += [f"guess_{i}", f"verdict_{i}"]
    return cols


def result_rows(results: Iterable[Dict], max_turns: int, N: int) -> Iterator[Dict]:
    """Flatten harness results into CSV rows; unused turns are left blank."""
    for r in results:
        row = dict.fromkeys(columns(max_turns), "")
        row.update(
            solver=r.get("solver_id", "?"),
            N=N,
            answer=r["answer"],
            success=r["success"],
            guesses=r["guesses"],
            invalid_guesses=r.get("invalid_guesses", 0),
            time_ms=round(float(r["time_ms"]), 3),
        )
        for i, (g, verdict) in enumerate(r.get("history", [])[:max_turns], 1):
            row[f"guess_{i}"] = g
            row[f"verdict_{i}"] = "'" + encode_verdict(verdict)
        yield row


def write_csv(results: List[Dict], path: str, max_turns: int, N: int) -> str:
    p = Path(path)
    p.parent.mkdir(parents=True, exist_ok=True)
    with p.open("w", newline="", encoding="utf-8") as f:
        w = csv.DictWriter(f, fieldnames=columns(max_turns))
        w.writeheader()
        w.writerows(result_rows(results, max_turns, N))
    return str(p)


def write_manifest(manifest: Dict, path: str) -> str:
    p = Path(path)
    p.parent.mkdir(parents=True, exist_ok=True)
    p.write_text(json.dumps(manifest, indent=2, default=str), encoding="utf-8")
    return str(p)


def timestamp_id() -> str:
    """UTC timestamp for file names, e.g. 20250820T024121Z."""
    return dt.datetime.now(dt.timezone.utc).strftime("%Y%m%dT%H%M%SZ")


def git_commit_or_unknown() -> str:
    try:
        proc = subprocess.run(
            ["git", "rev-parse", "--short", "HEAD"],
            capture_output=True, text=True, check=False,
        )
    except OSError:
        return "unknown"
    return proc.stdout.strip() if proc.returncode == 0 else "unknown"


def write_report(results: List[Dict], manifest: Dict, outdir: str,
                 max_turns: int, N: int) -> Tuple[str, str]:
    """
    Write the CSV and manifest for one run into `outdir`.

    `manifest` is extended with run_id, git_commit and num_cases.
    Returns (csv_path, manifest_path).
    """
    run_id = timestamp_id()
    out = Path(outdir)
    manifest = {
        "run_id": run_id,
        "git_commit": git_commit_or_unknown(),
        "num_cases": len(results),
        **manifest,
    }
    csv_path = write_csv(results, str(out / f"run_{run_id}.csv"), max_turns=max_turns, N=N)
    manifest_path = write_manifest(manifest, str(out / f"run_{run_id}_manifest.json"))
    return csv_path, manifest_path
