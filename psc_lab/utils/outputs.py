"""
Write stack outputs to a local env file.

Lets local tooling pick up addresses and ids without calling
`pulumi stack output`.
"""

from pathlib import Path

import pulumi

PROJECT_ROOT = Path(__file__).resolve().parents[2]


def write_outputs_to_env(
    outputs: dict[str, pulumi.Input],
    filename: str,
    directory: Path | None = None,
) -> pulumi.Output[str] | None:
    """
    Write resolved stack outputs as KEY=value lines.

    Values are unknown during preview, so nothing is written then.

    Args:
        outputs: Output name to value (plain or pulumi.Output)
        filename: Env file name
        directory: Target directory (defaults to the project root)

    Returns:
        Output resolving to the written file path, or None during preview
    """
    if pulumi.runtime.is_dry_run():
        pulumi.log.info(f"Preview: skipping write of {filename}")
        return None

    path = (directory or PROJECT_ROOT) / filename
    keys = list(outputs)

    def _write(values: list) -> str:
        lines = [
            f"{key.upper()}={'' if value is None else value}"
            for key, value in zip(keys, values)
        ]
        path.write_text("\n".join(lines) + "\n")
        pulumi.log.info(f"Wrote {len(lines)} outputs to {path}")
        return str(path)

    return pulumi.Output.all(*[outputs[key] for key in keys]).apply(_write)
