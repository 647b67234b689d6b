"""Token usage and cost estimates for chat-completion calls."""

from __future__ import annotations

from dataclasses import dataclass, field

# Pricing per 1M tokens (USD)
MODEL_PRICING: dict[str, dict[str, float]] = {
    "gpt-3.5-turbo": {"input": 0.50, "output": 1.50},
    "gpt-4o-mini": {"input": 0.15, "output": 0.60},
    "gpt-4o": {"input": 2.50, "output": 10.00},
}


@dataclass(frozen=True)
class CallCost:
    model: str
    input_tokens: int
    output_tokens: int
    cost_usd: float


@dataclass
class UsageReport:
    """Per-call costs plus session totals."""

    calls: list[CallCost] = field(default_factory=list)

    @property
    def input_tokens(self) -> int:
        return sum(c.input_tokens for c in self.calls)

    @property
    def output_tokens(self) -> int:
        return sum(c.output_tokens for c in self.calls)

    @property
    def cost_usd(self) -> float:
        return sum(c.cost_usd for c in self.calls)


def call_cost(model: str, input_tokens: int, output_tokens: int) -> CallCost:
    """Price one call; models missing from MODEL_PRICING cost nothing."""
    pricing = MODEL_PRICING.get(model, {"input": 0.0, "output": 0.0})
    cost = (input_tokens * pricing["input"] + output_tokens * pricing["output"]) / 1_000_000
    return CallCost(model, input_tokens, output_tokens, cost)


def build_usage_report(calls: list[tuple[str, int, int]]) -> UsageReport:
    """Turn a client token log of (model, input, output) entries into a report."""
    return UsageReport(calls=[call_cost(*entry) for entry in calls])
