# cliffbasic: Symbolic Clifford Algebra Calculator
# Copyright (C) 2026 Eunkyum Kim <nemonanconcode@gmail.com>
#
# Licensed under the Apache License, Version 2.0 (the "License");
# you may not use this file except in compliance with the License.
#
# This project is fully open-source, including for commercial use.
# We believe Geometric Algebra is the future of AI, and we want
# the industry to build upon this "unbending" paradigm.

"""Algebra configuration.

Collects the signature, the coefficient ring, and the canonicalization cache
size into a single :class:`AlgebraConfig` dataclass, loadable from an
OmegaConf ``DictConfig``, a plain dict, or a YAML file.
"""

import os
from dataclasses import asdict, dataclass
from typing import Any, Optional, Union

from omegaconf import DictConfig, OmegaConf
from omegaconf.errors import OmegaConfBaseException

from cliffbasic.blade import DEFAULT_CACHE_SIZE
from cliffbasic.errors import ConfigError
from cliffbasic.ring import get_ring
from cliffbasic.signature import DEFAULT_P, DEFAULT_Q, Signature


@dataclass
class AlgebraConfig:
    """Settings for a :class:`~cliffbasic.algebra.CliffordAlgebra`.

    Attributes:
        p: Generators squaring to +1.
        q: Generators squaring to -1.
        coefficients: Coefficient ring name (``symbolic`` or ``numeric``).
        cache_size: Max entries of the canonicalization memo. ``None`` ->
            unbounded, 0 -> disabled.
        validate: Run operand checks on every product.
    """

    p: int = DEFAULT_P
    q: int = DEFAULT_Q
    coefficients: str = "symbolic"
    cache_size: Optional[int] = DEFAULT_CACHE_SIZE
    validate: bool = True

    def __post_init__(self) -> None:
        # Both raise on bad input before any algebra is built
        Signature(self.p, self.q)
        get_ring(self.coefficients)
        if self.cache_size is not None and (
            isinstance(self.cache_size, bool)
            or not isinstance(self.cache_size, int)
            or self.cache_size < 0
        ):
            raise ConfigError(
                f"cache_size must be a non-negative int or None, got {self.cache_size!r}"
            )

    @property
    def signature(self) -> Signature:
        return Signature(self.p, self.q)

    def to_dict(self) -> dict:
        return asdict(self)

    @classmethod
    def from_omegaconf(cls, cfg: Union[DictConfig, dict, str, os.PathLike, None]) -> "AlgebraConfig":
        """Build a config, rejecting unknown keys and mistyped values.

        Args:
            cfg: A ``DictConfig``, a plain mapping, a path to a YAML file,
                or ``None`` for the defaults. A top-level ``algebra`` key is
                unwrapped if present.

        Raises:
            ConfigError: If omegaconf rejects the merge.
        """
        if cfg is None:
            return cls()
        if isinstance(cfg, (str, os.PathLike)):
            try:
                cfg = OmegaConf.load(cfg)
            except (OSError, OmegaConfBaseException) as exc:
                raise ConfigError(f"cannot load algebra config from {cfg}: {exc}") from exc
        if isinstance(cfg, dict):
            cfg = OmegaConf.create(cfg)
        if "algebra" in cfg:
            cfg = cfg.algebra

        schema = OmegaConf.structured(cls)
        try:
            merged = OmegaConf.merge(schema, cfg)
            values: Any = OmegaConf.to_container(merged, resolve=True)
        except OmegaConfBaseException as exc:
            raise ConfigError(f"invalid algebra config: {exc}") from exc
        return cls(**values)
