from typing import Iterable, Optional

# Target lookup modes
BY_METRIC = "metric"
BY_ROLE = "role"
ROLE_WITH_FALLBACK = "role_with_fallback"


def find_target(targets: Iterable, metric_key: str, role: Optional[str] = None, mode: str = ROLE_WITH_FALLBACK):
    """Pick the target for ``metric_key``.

    metric             -> first target for the metric, role ignored
    role               -> target for the metric and ``role`` only
    role_with_fallback -> role-specific target, else the first one for the metric
    """
    candidates = [t for t in targets if t.metric_key == metric_key]
    if mode == BY_METRIC:
        return candidates[0] if candidates else None

    role_match = next((t for t in candidates if role is not None and t.role == role), None)
    if mode == BY_ROLE:
        return role_match
    if mode == ROLE_WITH_FALLBACK:
        if role_match is not None:
            return role_match
        return candidates[0] if candidates else None
    raise ValueError(f"Unknown target lookup mode: {mode}")
