"""End-to-end normalization runner.

Wraps the pure normalization engine with the steps a calling service
performs around it: building the citation, validating the upstream
payload, recording provenance, and turning failures into citation errors
instead of exceptions.
"""

import sys
import time
from collections.abc import Mapping
from typing import Any

from citenorm.audit.logger import AuditLogger, new_run_id
from citenorm.engine.config import NormalizationConfig
from citenorm.models import Citation
from citenorm.normalize import normalize
from citenorm.normalize.payload import PayloadError, first_entry, validate_payload

NO_RESULTS_MESSAGE = "No results from WorldCat xisbn service"


def run_normalization(
    payload: Mapping[str, Any] | Any,
    id_type: str,
    id_value: str,
    config: NormalizationConfig | None = None,
    logger: AuditLogger | None = None,
) -> Citation:
    """Build and normalize a citation from an xISBN payload.

    Parameters
    ----------
    payload : Mapping[str, Any] | Any
        Decoded xISBN JSON response.
    id_type : str
        Requested identifier kind (e.g., 'isbn').
    id_value : str
        Requested identifier value.
    config : NormalizationConfig | None, optional
        Run configuration. If None, uses defaults.
    logger : AuditLogger | None, optional
        Audit logger. If None and ``config.log_path`` is set, one is opened
        for the duration of the run.

    Returns
    -------
    Citation
        Normalized citation. Failures are reported through
        ``citation.error`` and ``citation.response_code``: 400 for a payload
        that violates the schema, 404 when the payload holds no record.

    Raises
    ------
    ValueError
        If ``id_type`` is not a supported identifier kind.

    Examples
    --------
        >>> citation = run_normalization(payload, "isbn", "9780596519797")
        >>> citation.to_dict()["itemType"]
        'book'
    """
    if config is None:
        config = NormalizationConfig()

    citation = Citation(id_type, id_value)

    if logger is None and config.log_path is not None:
        with AuditLogger(new_run_id(), config.log_path, config.log_level) as run_logger:
            return _run(citation, payload, config, run_logger)

    return _run(citation, payload, config, logger)


def _run(
    citation: Citation,
    payload: Any,
    config: NormalizationConfig,
    logger: AuditLogger | None,
) -> Citation:
    start_time = time.perf_counter()
    if logger is not None:
        logger.run_started(command=sys.argv, parameters=config.to_dict())
        logger.set_stage("normalize")

    if config.validate_payload:
        try:
            validate_payload(payload)
        except PayloadError as e:
            _reject(citation, str(e), 400, logger)
            _finish(logger, "failed", start_time)
            return citation

    entry = first_entry(payload)
    if entry is None:
        _reject(citation, NO_RESULTS_MESSAGE, 404, logger)
        _finish(logger, "failed", start_time)
        return citation

    normalize(citation, entry, logger=logger)
    citation.add_source(config.source_tag)

    _finish(logger, "success", start_time)
    return citation


def _reject(
    citation: Citation, message: str, response_code: int, logger: AuditLogger | None
) -> None:
    citation.set_error(message, response_code)
    if logger is not None:
        logger.payload_rejected(citation.citation_id, message, response_code)


def _finish(logger: AuditLogger | None, status: str, start_time: float) -> None:
    if logger is not None:
        logger.set_stage(None)
        logger.run_finished(status=status, duration_seconds=time.perf_counter() - start_time)
