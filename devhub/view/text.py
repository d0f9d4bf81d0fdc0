from __future__ import annotations

from typing import List

from .renderer import ListView


def format_list_view(view: ListView) -> str:
    """Lay out a rendered list as plain text for the terminal."""

    if view.loading_message:
        return view.loading_message

    lines: List[str] = [view.heading]
    if view.error:
        lines.extend(["", f"Error: {view.error}"])

    if view.placeholder:
        lines.extend(["", view.placeholder])
        return "\n".join(lines)

    for index, row in enumerate(view.rows, start=1):
        lines.extend(["", f"{index}. {row.title}  [{row.record_id}]"])
        for detail in row.details:
            lines.append(f"   {detail}")
        if row.body is not None:
            lines.append("   ```")
            for code_line in row.body.splitlines() or [""]:
                lines.append(f"   {code_line}")
            lines.append("   ```")
        if row.footer:
            lines.append(f"   {row.footer}")

    return "\n".join(lines)


__all__ = ["format_list_view"]
