"""Batch driver: one shared obfuscation context across many documents."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable

from jsonmask.generators import seeded_source
from jsonmask.json_types import JSONValue
from jsonmask.obfuscate import ObfuscationContext


@dataclass(frozen=True)
class ObfuscationRun:
    outputs: list[JSONValue]
    context: ObfuscationContext


def new_context(*, seed: int | None = None, obfuscate_keys: bool = True) -> ObfuscationContext:
    return ObfuscationContext(rng=seeded_source(seed), obfuscate_keys=obfuscate_keys)


def run_batch(
    documents: Iterable[JSONValue],
    context: ObfuscationContext | None = None,
) -> ObfuscationRun:
    ctx = context if context is not None else new_context()
    outputs = [ctx.obfuscate(document) for document in documents]
    return ObfuscationRun(outputs=outputs, context=ctx)


def obfuscate_documents(
    documents: Iterable[JSONValue],
    context: ObfuscationContext | None = None,
) -> list[JSONValue]:
    """Obfuscate every document in order with tables shared across the batch."""
    return run_batch(documents, context).outputs
