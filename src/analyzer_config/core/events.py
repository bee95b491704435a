# src/analyzer_config/core/events.py
"""
Event log estruturado do carregamento e da construção de projetos.

O Analyzer Config não usa handlers de logging globais: quem carrega a
configuração ou constrói um `Project` pode fornecer um `EventLog`, e os
eventos ficam disponíveis como dicionários serializáveis e ordenados.

Invariantes:
    - Todo evento possui `source`, `level`, `message` e `timestamp` (UTC, ISO 8601)
    - A ordem da lista reflete a ordem de emissão
    - Os entry points de resolução nunca emitem eventos
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Any, Dict, List, Optional


_LEVELS = {"DEBUG", "INFO", "WARNING", "ERROR"}


@dataclass
class EventLog:
    """Lista ordenada de eventos estruturados."""

    events: List[Dict[str, Any]] = field(default_factory=list)

    def log(self, *, source: str, level: str, message: str, **extra: Any) -> None:
        level = level.upper()
        if level not in _LEVELS:
            raise ValueError(f"invalid event level: {level}")

        event = {
            "source": source,
            "level": level,
            "message": message,
            "timestamp": datetime.now(timezone.utc).isoformat(),
        }
        event.update(extra)
        self.events.append(event)

    def filter(self, *, source: Optional[str] = None, level: Optional[str] = None) -> List[Dict[str, Any]]:
        out = self.events
        if source is not None:
            out = [e for e in out if e["source"] == source]
        if level is not None:
            out = [e for e in out if e["level"] == level.upper()]
        return list(out)

    def __len__(self) -> int:
        return len(self.events)


def emit(events: Optional[EventLog], *, source: str, level: str, message: str, **extra: Any) -> None:
    """Registra o evento apenas quando um EventLog foi fornecido."""
    if events is not None:
        events.log(source=source, level=level, message=message, **extra)
