from enum import Enum
from typing import Any, List, Optional

from discover_actions.domain_model import ActionReference, StepDecomposition


class StepKind(Enum):
    USES = "uses"
    RUN = "run"


def classify_step(step: Any) -> List[StepKind]:
    """Return the kinds a step belongs to.

    ``uses`` and ``run`` are checked independently, so a step declaring both
    belongs to both kinds. An empty list means the step is neither.
    """
    kinds: List[StepKind] = []
    if not isinstance(step, dict):
        return kinds
    if step.get("uses"):
        kinds.append(StepKind.USES)
    if step.get("run"):
        kinds.append(StepKind.RUN)
    return kinds


def split_uses(uses: Any) -> ActionReference:
    """Split ``owner/repo@ref`` on the first ``@`` only.

    ``owner/repo@v2@extra`` gives ``ref == "v2@extra"``; a value without
    ``@`` (e.g. a local ``./path``) gives ``ref is None``.
    """
    action_id, sep, ref = str(uses).partition("@")
    return ActionReference(action_id=action_id, ref=ref if sep else None)


def decompose_steps(steps: Any) -> StepDecomposition:
    """Split a manifest's ``runs.steps`` into referenced actions and shell steps."""
    referenced_actions: List[ActionReference] = []
    shell_steps: List[Optional[str]] = []
    if not isinstance(steps, list):
        return StepDecomposition()

    for step in steps:
        kinds = classify_step(step)
        if StepKind.USES in kinds:
            referenced_actions.append(split_uses(step["uses"]))
        if StepKind.RUN in kinds:
            # the declared name is kept as-is, even when missing
            name = step.get("name")
            shell_steps.append(None if name is None else str(name))

    return StepDecomposition(referenced_actions=referenced_actions, shell_steps=shell_steps)
