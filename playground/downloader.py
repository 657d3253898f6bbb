"""Downloading large files in parallel byte ranges, with progress reporting."""

from __future__ import annotations

import argparse
import logging
import os
import shutil
import sys
import tempfile
import threading
import time
import urllib.error
import urllib.request
from concurrent.futures import ThreadPoolExecutor, as_completed
from dataclasses import dataclass, field
from pathlib import Path
from typing import BinaryIO, List, Optional, Sequence, Union

logger = logging.getLogger(__name__)

PathLike = Union[str, Path]

DEFAULT_WORKERS = 5
DEFAULT_CHUNK_SIZE = 5 * 1024 * 1024
DEFAULT_OUTPUT = "downloaded-file.bin"
CHUNK_TIMEOUT = 30 * 60
_MB = 1024 * 1024
_BLOCK = 64 * 1024


class DownloadError(Exception):
    """Raised when a file or one of its chunks cannot be downloaded."""


@dataclass(frozen=True)
class ChunkJob:
    """One byte range of a file to be saved to its own chunk file."""

    url: str
    file_name: str
    start_byte: int
    end_byte: int
    chunk_number: int
    total_chunks: int


@dataclass(frozen=True)
class ChunkResult:
    """The outcome of downloading one chunk."""

    chunk_number: int
    bytes_read: int
    error: Optional[BaseException] = None


@dataclass
class ProgressWriter:
    """Passes bytes to another writer, printing progress at most ten times a second."""

    total: int
    writer: BinaryIO
    start_time: float = field(default_factory=time.monotonic)
    current: int = 0
    last_print: Optional[float] = None

    def write(self, data: bytes) -> int:
        written = self.writer.write(data)
        if written is None:
            written = len(data)
        self.current += written

        now = time.monotonic()
        if self.last_print is None or now - self.last_print >= 0.1:
            self.last_print = now
            percent = self.current / self.total * 100 if self.total else 100.0
            elapsed = now - self.start_time
            speed = self.current / elapsed / _MB if elapsed > 0 else 0.0
            print(
                f"\rDownloading... {percent:.1f}% "
                f"({self.current / _MB:.2f} MB/{self.total / _MB:.2f} MB) at {speed:.2f} MB/s",
                end="",
                flush=True,
            )
        return written


def _chunk_path(directory: PathLike, number: int) -> Path:
    return Path(directory) / f"chunk_{number}"


def plan_chunks(url: str, directory: PathLike, file_size: int, chunk_size: int) -> List[ChunkJob]:
    """Split a file of file_size bytes into jobs of at most chunk_size bytes."""
    if chunk_size <= 0:
        raise ValueError("chunk size must be positive")
    total = -(-file_size // chunk_size)
    return [
        ChunkJob(
            url=url,
            file_name=str(_chunk_path(directory, number)),
            start_byte=number * chunk_size,
            end_byte=min((number + 1) * chunk_size, file_size) - 1,
            chunk_number=number,
            total_chunks=total,
        )
        for number in range(total)
    ]


def get_file_size(url: str) -> int:
    """The size the server reports for url in a HEAD response."""
    request = urllib.request.Request(url, method="HEAD")
    try:
        with urllib.request.urlopen(request) as response:
            status, reason = response.status, response.reason
            content_length = response.headers.get("Content-Length")
    except urllib.error.HTTPError as exc:
        raise DownloadError(f"server returned non-200 status: {exc.code} {exc.reason}") from exc
    except urllib.error.URLError as exc:
        raise DownloadError(str(exc.reason)) from exc

    if status != 200:
        raise DownloadError(f"server returned non-200 status: {status} {reason}")
    if not content_length:
        raise DownloadError("content length header not found")
    try:
        return int(content_length)
    except ValueError:
        raise DownloadError(f"invalid content length: {content_length}") from None


def download_chunk(job: ChunkJob) -> int:
    """Fetch the job's byte range into its chunk file and return the bytes written."""
    with open(job.file_name, "wb") as out:
        request = urllib.request.Request(
            job.url, headers={"Range": f"bytes={job.start_byte}-{job.end_byte}"}
        )
        try:
            response = urllib.request.urlopen(request, timeout=CHUNK_TIMEOUT)
        except urllib.error.HTTPError as exc:
            raise DownloadError(f"unexpected status code: {exc.code}") from exc
        with response:
            if response.status not in (200, 206):
                raise DownloadError(f"unexpected status code: {response.status}")
            written = 0
            for block in iter(lambda: response.read(_BLOCK), b""):
                out.write(block)
                written += len(block)
    return written


def merge_chunks(directory: PathLike, output_path: PathLike, total_chunks: int) -> None:
    """Concatenate chunk_0 .. chunk_{total_chunks-1} from directory into output_path."""
    with open(output_path, "wb") as out:
        for number in range(total_chunks):
            with open(_chunk_path(directory, number), "rb") as chunk:
                shutil.copyfileobj(chunk, out)


def bytes_downloaded(directory: PathLike) -> int:
    """The total size of all files below directory."""
    total = 0
    for root, _dirs, files in os.walk(directory):
        for name in files:
            try:
                total += os.path.getsize(os.path.join(root, name))
            except OSError:
                continue
    return total


def _run_job(job: ChunkJob) -> ChunkResult:
    logger.info(
        "%s downloading chunk %d/%d (bytes %d-%d)",
        threading.current_thread().name,
        job.chunk_number + 1,
        job.total_chunks,
        job.start_byte,
        job.end_byte,
    )
    try:
        return ChunkResult(job.chunk_number, download_chunk(job))
    except Exception as exc:  # reported back to the collector
        return ChunkResult(job.chunk_number, 0, exc)


def download_large_file(
    url: str,
    output_path: PathLike,
    num_workers: int = DEFAULT_WORKERS,
    chunk_size: int = DEFAULT_CHUNK_SIZE,
) -> None:
    """Download url to output_path in ranges fetched by num_workers threads."""
    with tempfile.TemporaryDirectory(prefix="download-chunks") as temp_dir:
        try:
            file_size = get_file_size(url)
        except DownloadError as exc:
            raise DownloadError(f"failed to get file size: {exc}") from exc

        print(f"File size: {file_size} bytes ({file_size / _MB:.2f} MB)")
        jobs = plan_chunks(url, temp_dir, file_size, chunk_size)
        total = len(jobs)

        start = time.monotonic()
        completed = 0
        with ThreadPoolExecutor(max_workers=num_workers) as pool:
            futures = [pool.submit(_run_job, job) for job in jobs]
            for future in as_completed(futures):
                result = future.result()
                if result.error is not None:
                    pool.shutdown(wait=False, cancel_futures=True)
                    raise DownloadError(
                        f"chunk {result.chunk_number} failed: {result.error}"
                    ) from result.error
                completed += 1
                percentage = completed / total * 100
                elapsed = time.monotonic() - start
                speed = bytes_downloaded(temp_dir) / elapsed / _MB if elapsed > 0 else 0.0
                print(
                    f"\rProgress: {percentage:.1f}% (Chunks: {completed}/{total}) "
                    f"- Speed: {speed:.2f} MB/s",
                    end="",
                    flush=True,
                )
        print()

        try:
            merge_chunks(temp_dir, output_path, total)
        except OSError as exc:
            raise DownloadError(f"failed to merge chunks: {exc}") from exc


def download_without_ranges(url: str, output_path: PathLike) -> None:
    """Download url to output_path in one request, for servers without range support."""
    with open(output_path, "wb") as out:
        try:
            response = urllib.request.urlopen(url)
        except urllib.error.HTTPError as exc:
            raise DownloadError(f"bad status: {exc.code} {exc.reason}") from exc
        with response:
            if response.status != 200:
                raise DownloadError(f"bad status: {response.status} {response.reason}")
            writer: Union[BinaryIO, ProgressWriter] = out
            length = response.length or 0
            if length > 0:
                print(f"Downloading {length} bytes...")
                writer = ProgressWriter(total=length, writer=out)
            shutil.copyfileobj(response, writer)


def main(argv: Optional[Sequence[str]] = None) -> int:
    parser = argparse.ArgumentParser(description="Download a large file in parallel chunks.")
    parser.add_argument("url", help="address of the file to download")
    parser.add_argument("-o", "--output", default=DEFAULT_OUTPUT, help="local file path")
    parser.add_argument("-w", "--workers", type=int, default=DEFAULT_WORKERS)
    parser.add_argument("-c", "--chunk-size", type=int, default=DEFAULT_CHUNK_SIZE)
    args = parser.parse_args(argv)

    try:
        download_large_file(args.url, args.output, args.workers, args.chunk_size)
    except (DownloadError, OSError, ValueError) as exc:
        print(f"Download failed: {exc}", file=sys.stderr)
        return 1
    print("Download completed successfully!")
    return 0


if __name__ == "__main__":
    sys.exit(main())