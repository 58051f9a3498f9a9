from __future__ import annotations

from dataclasses import dataclass
from typing import Tuple


@dataclass(frozen=True)
class LamboModel:
    id: str
    name: str
    price: float  # approximate 2024/2025 MSRP in USD
    emoji: str

    @property
    def label(self) -> str:
        return f"{self.emoji} {self.name} - ${self.price:,.0f}"


# Selectable target cars. Prices are the base (un-inflated) targets fed to the engine.
LAMBO_MODELS: Tuple[LamboModel, ...] = (
    LamboModel("huracan", "Huracán EVO", 261274.0, "🟡"),
    LamboModel("huracan-sto", "Huracán STO", 327838.0, "🟠"),
    LamboModel("huracan-tecnica", "Huracán Tecnica", 302064.0, "🟡"),
    LamboModel("urus", "Urus S", 239050.0, "🔵"),
    LamboModel("urus-performante", "Urus Performante", 260676.0, "🔵"),
    LamboModel("revuelto", "Revuelto", 608358.0, "🔴"),
    LamboModel("aventador-svj", "Aventador SVJ (Used)", 550000.0, "🟣"),
    LamboModel("sian", "Sián FKP 37 (Collector)", 3600000.0, "💎"),
)


def get_model(model_id: str) -> LamboModel:
    for model in LAMBO_MODELS:
        if model.id == model_id:
            return model
    raise ValueError(f"Unknown Lamborghini model: {model_id!r}")
