"""Assemble and run piscem and salmon commands for a fragment geometry."""

import logging
import subprocess
from typing import List

from .config import Config
from .models import FragmentGeomDesc
from .transducers import GeometryDescription, PiscemGeomDesc, SalmonSeparateGeomDesc

logger = logging.getLogger(__name__)

TOOLS = {
    "piscem": PiscemGeomDesc,
    "salmon": SalmonSeparateGeomDesc,
}


def build_command(tool: str, desc: GeometryDescription, config: Config = None) -> List[str]:
    """Build the argument list invoking ``tool`` with ``desc``'s geometry flags."""
    config = config or Config()
    tool_config = config.tool(tool)
    cmd = [tool_config.executable, *tool_config.extra_args]
    return desc.append(cmd)


def build_commands(
    frag_desc: FragmentGeomDesc,
    config: Config = None,
    tools: List[str] = None,
) -> dict[str, List[str]]:
    """Build the command for each requested tool.

    salmon is skipped for complex geometries, which its separate format
    cannot express.

    Args:
        frag_desc: Parsed fragment geometry
        config: Tool configuration (defaults to ``Config()``)
        tools: Tools to build commands for (defaults to all)

    Returns:
        Mapping of tool name to argument list
    """
    config = config or Config()
    commands = {}
    for tool in tools or list(TOOLS):
        if tool == "salmon" and frag_desc.is_complex_geometry():
            logger.info(f"Skipping salmon: geometry {frag_desc} is complex")
            continue
        desc = TOOLS[tool].from_fragment_geom(frag_desc)
        commands[tool] = build_command(tool, desc, config)
    return commands


def run_command(cmd: List[str]) -> int:
    """Run a command and return its exit code."""
    logger.info(f"Running: {' '.join(cmd)}")
    result = subprocess.run(cmd)
    return result.returncode
