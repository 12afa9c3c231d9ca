"""
Render display records back into section lines.

Enabled blocks get bare directives; disabled blocks get every directive
commented as "# <directive>", whatever prefix the input used.
"""

from typing import List, Sequence

from ..models import DisplayConfig, DisplayStatus

HEADER_FORMAT = "# Description = {description}, Status = {status}"


def activate(configs: Sequence[DisplayConfig], index: int) -> List[DisplayConfig]:
    """
    Enable the record at index and disable all others.

    Args:
        configs: Parsed records
        index: 0-based index of the record to enable

    Returns:
        New list of updated copies; the input records are left untouched

    Raises:
        IndexError: If index is out of range
    """
    if not 0 <= index < len(configs):
        raise IndexError(f"Display configuration index {index} out of range (0-{len(configs) - 1})")

    return [
        config.model_copy(update={
            "status": DisplayStatus.ENABLED if i == index else DisplayStatus.DISABLED,
            "outputs": list(config.outputs),
        })
        for i, config in enumerate(configs)
    ]


def render_header(config: DisplayConfig) -> str:
    return HEADER_FORMAT.format(description=config.description, status=config.status.value)


def render_output(config: DisplayConfig, output: str) -> str:
    if config.is_enabled:
        return output
    return f"# {output.lstrip('#').lstrip()}"


def render_section(configs: Sequence[DisplayConfig]) -> List[str]:
    """
    Render records as section body lines.

    No blank lines are emitted between blocks, so repeated runs never
    accumulate whitespace.
    """
    lines: List[str] = []
    for config in configs:
        lines.append(render_header(config))
        lines.extend(render_output(config, output) for output in config.outputs)
    return lines
