"""Ports (interfaces) for the banking domain."""

from tanflow.domain.banking.ports.challenge_ports import (
    FlickerDecoderPort,
    FlickerRendererPort,
    ImageDecoderPort,
)
from tanflow.domain.banking.ports.protocol_engine_port import ProtocolEnginePort
from tanflow.domain.banking.ports.session_store_port import SessionStorePort
from tanflow.domain.banking.ports.user_io_port import UserIOPort

__all__ = [
    "FlickerDecoderPort",
    "FlickerRendererPort",
    "ImageDecoderPort",
    "ProtocolEnginePort",
    "SessionStorePort",
    "UserIOPort",
]
