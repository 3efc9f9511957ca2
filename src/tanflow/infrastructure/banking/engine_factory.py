"""Create a configured protocol engine from connection options."""

from __future__ import annotations

import logging
from typing import Any, Optional

from fints.client import FinTS3PinTanClient
from pydantic import ValidationError as PydanticValidationError

from tanflow.domain.banking.exceptions import InvalidConnectionOptionsError
from tanflow.domain.banking.value_objects import ConnectionOptions
from tanflow.infrastructure.banking.python_fints_adapter import PythonFintsAdapter

logger = logging.getLogger(__name__)


def build_connection_options(**values: Any) -> ConnectionOptions:
    """Validate raw values into ConnectionOptions.

    Raises
    ------
    InvalidConnectionOptionsError
        If a value is missing or malformed
    """
    try:
        return ConnectionOptions(**values)
    except PydanticValidationError as e:
        first = e.errors()[0]
        field = ".".join(str(part) for part in first.get("loc", ()))
        msg = f"Invalid connection option {field or 'value'}: {first.get('msg')}"
        raise InvalidConnectionOptionsError(msg, field=field or None) from e


def create_engine(options: ConnectionOptions) -> PythonFintsAdapter:
    """Create a python-fints engine with TAN mechanism and medium selected."""

    def client_factory(from_data: Optional[bytes]) -> FinTS3PinTanClient:
        client = FinTS3PinTanClient(
            options.blz,
            options.user_id,
            options.pin.get_value(),
            options.server_url,
            product_id=options.product_id,
            product_version=options.product_version,
            from_data=from_data,
        )
        if options.tan_mechanism:
            client.set_tan_mechanism(options.tan_mechanism)
        if options.tan_medium:
            client.selected_tan_medium = options.tan_medium
        return client

    logger.info("Creating FinTS engine for %s", options)
    if options.tan_mechanism:
        logger.info("Using TAN mechanism: %s", options.tan_mechanism)
    if options.tan_medium:
        logger.info("Using TAN medium: %s", options.tan_medium)

    return PythonFintsAdapter(client_factory)
