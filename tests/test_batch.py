"""Tests for the sequential batch runner and ``summary.json``."""

from __future__ import annotations

import json

import httpx
import respx

from sitegrab.batch import run_batch, summary_path_for


_OK_HTML = b'<html><body><a href="/next">next</a></body></html>'


def test_summary_has_one_entry_per_target_in_order(tmp_path) -> None:
    targets = [
        "https://ok.test/",
        "not-a-url",
        "https://down.test/",
        "https://gone.test/",
    ]
    lines: list[str] = []

    with respx.mock:
        respx.get("https://ok.test/").mock(return_value=httpx.Response(200, content=_OK_HTML))
        respx.get("https://down.test/").mock(side_effect=httpx.ConnectError("refused"))
        respx.get("https://gone.test/").mock(return_value=httpx.Response(410, content=b"gone"))
        results = run_batch(targets, tmp_path, timeout=10, echo=lines.append)

    assert [r.url for r in results] == targets

    summary = json.loads(summary_path_for(tmp_path).read_text(encoding="utf-8"))
    assert [entry["url"] for entry in summary] == targets
    assert "error" not in summary[0]
    assert summary[0]["links_found"] == 1
    assert summary[1]["error"] == "invalid URL"
    assert summary[2]["http_status"] == 0
    assert summary[3]["http_status"] == 410


def test_progress_lines(tmp_path) -> None:
    lines: list[str] = []

    with respx.mock:
        respx.get("https://ok.test/").mock(return_value=httpx.Response(200, content=_OK_HTML))
        run_batch(["https://ok.test/", "bad"], tmp_path, timeout=10, echo=lines.append)

    assert lines == [
        "\n[1/2] https://ok.test/",
        "   [+] HTML saved. Status=200, Links=1, Screenshot=False",
        "\n[2/2] bad",
        "   [-] Error: invalid URL",
    ]


def test_empty_target_list_writes_empty_summary(tmp_path) -> None:
    results = run_batch([], tmp_path, echo=lambda _line: None)

    assert results == []
    assert json.loads(summary_path_for(tmp_path).read_text(encoding="utf-8")) == []


def test_targets_are_processed_sequentially(tmp_path) -> None:
    seen: list[str] = []

    class RecordingCapturer:
        def capture(self, url, out_path, timeout):
            seen.append(url)
            out_path.write_bytes(b"png")

    with respx.mock:
        respx.get("https://a.test/").mock(return_value=httpx.Response(200, content=_OK_HTML))
        respx.get("https://b.test/").mock(return_value=httpx.Response(200, content=_OK_HTML))
        results = run_batch(
            ["https://a.test/", "https://b.test/"],
            tmp_path,
            timeout=10,
            capturer=RecordingCapturer(),
            echo=lambda _line: None,
        )

    assert seen == ["https://a.test/", "https://b.test/"]
    assert all(r.screenshot_ok for r in results)
