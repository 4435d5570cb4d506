# analysis/ingest.py
"""Turn delimited access-log rows into Event records.

Row schema: timestamp,userId,sessionId,actionType,targetResource,severityLevel,bytesTransferred

Short rows are dropped silently. Rows whose numeric fields do not parse are
malformed: they are logged and skipped, or re-raised in strict mode. Bytes
that are not valid UTF-8 become U+FFFD and the row is logged. Only an
unreadable source is fatal.
"""
from __future__ import annotations
import logging
from typing import Iterable, List, Optional
from datamodels.events import Event
from infra.errors import MalformedRowError, SourceUnavailableError
from utils.performance import MemoryOptimizer
from constants import (
    FIELD_COUNT, FIELD_DELIMITER, HEADER_TOKEN, FILE_NOT_FOUND_ERROR,
    NON_INTEGER_FIELD_ERROR, NEGATIVE_BYTES_ERROR, UNDECODABLE_BYTES_WARNING,
)

logger = logging.getLogger(__name__)

REPLACEMENT_CHAR = "\ufffd"

def is_header(line: str) -> bool:
    return HEADER_TOKEN in line.lower()

def parse_row(line: str, line_number: int = 0) -> Optional[Event]:
    """Parse one row, returning None for rows with too few fields."""
    cols = [c.strip() for c in line.split(FIELD_DELIMITER)]
    if len(cols) < FIELD_COUNT:
        return None
    try:
        timestamp = int(cols[0])
        severity = int(cols[5])
        nbytes = int(cols[6])
    except ValueError:
        raise MalformedRowError(line, NON_INTEGER_FIELD_ERROR, line_number)
    if nbytes < 0:
        raise MalformedRowError(line, NEGATIVE_BYTES_ERROR, line_number)
    return Event(
        timestamp=timestamp,
        user_id=cols[1],
        session_id=cols[2],
        action_type=cols[3],
        target_resource=cols[4],
        severity_level=severity,
        bytes_transferred=nbytes,
    )

def parse_lines(lines: Iterable[str], strict: bool = False) -> List[Event]:
    events: List[Event] = []
    first = True
    dropped = 0
    for line_number, line in enumerate(lines, 1):
        line = line.rstrip("\r\n")
        if not line.strip():
            continue
        if first:
            first = False
            if is_header(line):
                continue
        try:
            ev = parse_row(line, line_number)
        except MalformedRowError as e:
            if strict:
                raise
            logger.warning(f"Skipping {e}")
            dropped += 1
            continue
        if ev is None:
            dropped += 1
            continue
        if REPLACEMENT_CHAR in line:
            logger.warning(f"Row {line_number} {UNDECODABLE_BYTES_WARNING}: {line!r}")
        events.append(ev)
    if dropped:
        logger.info(f"Dropped {dropped} unusable rows")
    return events

def load_events(path: str, strict: bool = False) -> List[Event]:
    """Read and parse a whole log file.

    Raises SourceUnavailableError when the file cannot be opened or read; no
    partial result is returned in that case.
    """
    try:
        events = parse_lines(MemoryOptimizer.stream_file_lines(path), strict=strict)
    except FileNotFoundError:
        logger.error(f"File not found: {path}")
        raise SourceUnavailableError(f"{FILE_NOT_FOUND_ERROR}: {path}")
    except OSError as e:
        logger.error(f"Error reading file {path}: {e}")
        raise SourceUnavailableError(f"Failed to read file {path}: {e}")
    logger.info(f"Loaded {len(events)} events from {path} "
                f"({MemoryOptimizer.memory_usage_mb():.1f}MB resident)")
    return events
