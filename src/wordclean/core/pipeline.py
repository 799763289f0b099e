# src/wordclean/core/pipeline.py
from __future__ import annotations

import logging
from typing import Callable, Iterable, List, Optional, Tuple

from bs4 import Tag

from wordclean.core.services.attribute_normalize_service import clean_attributes
from wordclean.core.services.heading_service import convert_headings
from wordclean.core.services.inherited_style_service import deduplicate_inherited_styles
from wordclean.core.services.list_service import convert_lists, convert_online_lists
from wordclean.core.services.noise_removal_service import remove_noise_nodes
from wordclean.core.services.structure_flatten_service import merge_sibling_lists, unwrap_divs
from wordclean.core.services.style_normalize_service import clean_styles
from wordclean.core.services.whitespace_cleanup_service import (
    clean_heading_spans,
    remove_empty_blocks,
    replace_nbsp,
    unwrap_empty_spans,
    unwrap_whitespace_spans,
)

logger = logging.getLogger(__name__)

Transform = Callable[[Tag], Tag]


class StageDefinition:
    """
    Configuration object binding a stage name to its tree transform.
    """

    def __init__(self, name: str, transform: Transform, requires: Optional[Iterable[str]] = None):
        self.name = name
        self.transform = transform
        self.requires: Tuple[str, ...] = tuple(requires or ())

    def __repr__(self) -> str:
        return f"StageDefinition({self.name!r})"


# The fixed stage order. Each entry lists the stages whose output it relies on.
DEFAULT_STAGES: Tuple[StageDefinition, ...] = (
    StageDefinition("convert_headings", convert_headings),
    StageDefinition("convert_online_lists", convert_online_lists, requires=["convert_headings"]),
    StageDefinition("convert_lists", convert_lists, requires=["convert_headings"]),
    StageDefinition("unwrap_divs", unwrap_divs, requires=["convert_online_lists", "convert_lists"]),
    StageDefinition("merge_sibling_lists", merge_sibling_lists, requires=["unwrap_divs"]),
    StageDefinition("remove_noise_nodes", remove_noise_nodes, requires=["convert_lists"]),
    StageDefinition("clean_styles", clean_styles, requires=["remove_noise_nodes"]),
    StageDefinition("clean_attributes", clean_attributes, requires=["convert_headings", "convert_online_lists", "convert_lists"]),
    StageDefinition("clean_heading_spans", clean_heading_spans, requires=["convert_headings"]),
    StageDefinition("deduplicate_inherited_styles", deduplicate_inherited_styles, requires=["clean_styles", "clean_attributes"]),
    StageDefinition("unwrap_empty_spans", unwrap_empty_spans, requires=["clean_attributes", "deduplicate_inherited_styles"]),
    StageDefinition("replace_nbsp", replace_nbsp, requires=["convert_online_lists"]),
    StageDefinition("unwrap_whitespace_spans", unwrap_whitespace_spans, requires=["replace_nbsp"]),
    StageDefinition("remove_empty_blocks", remove_empty_blocks, requires=["unwrap_whitespace_spans"]),
)


class CleanPipeline:
    """
    Runs an ordered sequence of tree transforms over one parsed fragment.
    The order is validated up front: a stage may only depend on stages that
    run before it.
    """

    def __init__(self, stages: Optional[Iterable[StageDefinition]] = None, log_stages: bool = False):
        self.stages: List[StageDefinition] = list(stages if stages is not None else DEFAULT_STAGES)
        self.log_stages = log_stages
        self._validate_order()

    def _validate_order(self) -> None:
        seen: set[str] = set()
        known = {stage.name for stage in self.stages}
        for stage in self.stages:
            for dep in stage.requires:
                if dep in known and dep not in seen:
                    raise ValueError(f"Stage '{stage.name}' must run after '{dep}'.")
            seen.add(stage.name)

    @property
    def stage_names(self) -> List[str]:
        return [stage.name for stage in self.stages]

    def run(self, container: Tag) -> Tag:
        """Applies every stage in order and returns the transformed container."""
        for stage in self.stages:
            container = stage.transform(container)
            if self.log_stages:
                logger.debug("Stage '%s' done: %d elements left.", stage.name, len(container.find_all(True)))
        return container
