import logging
from typing import Dict, Iterable, List, Mapping, Optional, Tuple
from app.data.recommendations import DEFAULT_RECOMMENDATIONS
from app.schemas.kpi import Recommendation

logger = logging.getLogger(__name__)

CATEGORY_NAMES = ("critical", "bad", "target", "good")


class RecommendationCatalog:
    """Two-level lookup: metric key -> category name -> Recommendation.

    Built once from a plain mapping. Malformed cells are dropped with a warning,
    and lookups never raise: a missing metric or category returns None.
    """

    def __init__(self, table: Mapping[str, Mapping[str, Mapping]]):
        self._table: Dict[str, Dict[str, Recommendation]] = {}
        for metric_key, cells in table.items():
            row = {}
            for category_name, cell in cells.items():
                title = cell.get("title")
                items = list(cell.get("recommendations") or [])
                if not title or not items:
                    logger.warning("Skipping incomplete recommendation cell %s/%s", metric_key, category_name)
                    continue
                row[category_name.lower()] = Recommendation(title=title, recommendations=items)
            self._table[metric_key] = row

    @property
    def metric_keys(self) -> List[str]:
        return list(self._table)

    def select(self, metric_key: str, category_name: str) -> Optional[Recommendation]:
        return self._table.get(metric_key, {}).get(category_name.lower())

    def missing_cells(self, metric_keys: Iterable[str]) -> List[Tuple[str, str]]:
        return [
            (metric_key, category_name)
            for metric_key in metric_keys
            for category_name in CATEGORY_NAMES
            if self.select(metric_key, category_name) is None
        ]

    def validate(self, metric_keys: Iterable[str]) -> List[Tuple[str, str]]:
        """Log a warning per missing (metric, category) cell and return them."""
        missing = self.missing_cells(metric_keys)
        for metric_key, category_name in missing:
            logger.warning("No recommendation text for metric %r in category %r", metric_key, category_name)
        return missing


default_catalog = RecommendationCatalog(DEFAULT_RECOMMENDATIONS)


def select_recommendations(
    metric_key: str, category_name: str, catalog: Optional[RecommendationCatalog] = None
) -> Optional[Recommendation]:
    return (catalog or default_catalog).select(metric_key, category_name)
