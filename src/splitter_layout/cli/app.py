"""Typer CLI application for inspecting splitter layouts."""

import json
import logging
from typing import Annotated, Optional

import typer
from rich.console import Console
from rich.logging import RichHandler
from rich.markup import escape
from rich.table import Table
from rich.tree import Tree

from splitter_layout.core.constants import DEFAULT_HEIGHT, DEFAULT_WIDTH, DEMO_LAYOUT
from splitter_layout.core.errors import LayoutError
from splitter_layout.core.panel import PanelTree
from splitter_layout.core.rect import Rect
from splitter_layout.engine.layout import Layout
from splitter_layout.engine.selection import SelectType

DescriptionArg = Annotated[
    str, typer.Argument(help="Layout description, e.g. 'V{W{1}:H{W{2}:W{3}}}'")
]
WidthOpt = Annotated[int, typer.Option("--width", "-w", help="Region width in pixels")]
HeightOpt = Annotated[int, typer.Option("--height", "-H", help="Region height in pixels")]
JsonOpt = Annotated[bool, typer.Option("--json", "-j", help="Output as JSON")]


def parse_size(value: str) -> tuple[int, int]:
    """Parse 'WIDTHxHEIGHT'."""
    try:
        width, height = (int(part) for part in value.lower().split("x"))
    except ValueError:
        raise typer.BadParameter(f"expected WIDTHxHEIGHT, got {value!r}")
    return width, height


def parse_point(value: str) -> tuple[int, int]:
    """Parse 'X,Y'."""
    try:
        x, y = (int(part) for part in value.split(","))
    except ValueError:
        raise typer.BadParameter(f"expected X,Y, got {value!r}")
    return x, y


def panels_table(panels: dict[int, Rect], title: str) -> Table:
    """Rich table of window rectangles ordered by id."""
    table = Table(title=title)
    table.add_column("Window", justify="right", style="bold cyan")
    table.add_column("Left", justify="right")
    table.add_column("Top", justify="right")
    table.add_column("Right", justify="right")
    table.add_column("Bottom", justify="right")
    table.add_column("Size", justify="right", style="green")
    for panel_id in sorted(panels):
        rect = panels[panel_id]
        table.add_row(
            str(panel_id),
            str(rect.left),
            str(rect.top),
            str(rect.right),
            str(rect.bottom),
            f"{rect.width}x{rect.height}",
        )
    return table


def panels_json(panels: dict[int, Rect]) -> str:
    return json.dumps({str(panel_id): panels[panel_id].to_dict() for panel_id in sorted(panels)}, indent=2)


def panel_tree(tree: PanelTree, index: int = 0, parent: Optional[Tree] = None) -> Tree:
    """Rich tree mirroring the panel hierarchy."""
    panel = tree[index]
    if panel.is_leaf:
        label = f"[bold cyan]W{panel.id}[/] {panel.rect}"
    else:
        assert panel.splitter is not None
        label = (
            f"[bold magenta]{panel.kind.tag}[/] {panel.rect} "
            f"[dim]divider at {panel.splitter.position}[/]"
        )

    node = Tree(label) if parent is None else parent.add(label)
    if panel.children is not None:
        for child in panel.children:
            panel_tree(tree, child, node)
    return node


def create_app() -> typer.Typer:
    """Create and configure the CLI application."""
    app = typer.Typer(
        name="splitter-layout",
        help="Lay out panels from a layout description and inspect the geometry.",
        no_args_is_help=True,
        rich_markup_mode="rich",
    )
    console = Console()

    def build(description: str, width: int, height: int) -> Layout:
        layout = Layout()
        try:
            layout.init(description, Rect.from_size(width, height))
        except LayoutError as e:
            console.print(f"[red]Invalid layout:[/] {escape(str(e))}")
            raise typer.Exit(1)
        return layout

    @app.callback()
    def main(
        verbose: Annotated[bool, typer.Option("--verbose", "-v", help="Show debug logging")] = False,
    ) -> None:
        if verbose:
            logging.basicConfig(
                level=logging.DEBUG,
                format="%(message)s",
                handlers=[RichHandler(console=Console(stderr=True), show_path=False)],
            )

    @app.command()
    def show(
        description: DescriptionArg = DEMO_LAYOUT,
        width: WidthOpt = DEFAULT_WIDTH,
        height: HeightOpt = DEFAULT_HEIGHT,
        resize: Annotated[Optional[str], typer.Option("--resize", "-r", help="Resize to WIDTHxHEIGHT after building")] = None,
        json_output: JsonOpt = False,
    ) -> None:
        """Show the window rectangles of a layout."""
        layout = build(description, width, height)
        if resize:
            width, height = parse_size(resize)
            try:
                layout.update(Rect.from_size(width, height))
            except LayoutError as e:
                console.print(f"[red]Resize failed:[/] {escape(str(e))}")
                raise typer.Exit(1)

        panels = layout.panels()
        if json_output:
            print(panels_json(panels))
        else:
            console.print(panels_table(panels, f"{len(panels)} windows in {width}x{height}"))

    @app.command()
    def tree(
        description: DescriptionArg = DEMO_LAYOUT,
        width: WidthOpt = DEFAULT_WIDTH,
        height: HeightOpt = DEFAULT_HEIGHT,
    ) -> None:
        """Show the panel hierarchy with splitter positions."""
        layout = build(description, width, height)
        console.print(panel_tree(layout.tree))

    @app.command()
    def check(
        description: DescriptionArg,
    ) -> None:
        """Validate a layout description."""
        layout = build(description, DEFAULT_WIDTH, DEFAULT_HEIGHT)
        tree = layout.tree
        console.print(
            f"[green]Valid layout[/]: {len(tree.panels)} windows, {len(tree.splitters)} splitters"
        )

    @app.command()
    def drag(
        start: Annotated[str, typer.Option("--from", help="Pointer down position X,Y")],
        end: Annotated[str, typer.Option("--to", help="Pointer release position X,Y")],
        description: DescriptionArg = DEMO_LAYOUT,
        width: WidthOpt = DEFAULT_WIDTH,
        height: HeightOpt = DEFAULT_HEIGHT,
        json_output: JsonOpt = False,
    ) -> None:
        """Drag whatever splitters lie under --from to --to."""
        from splitter_layout.shell import LayoutSession, Pointer, PointerEvent, PointerState, RecordingHost

        x0, y0 = parse_point(start)
        x1, y1 = parse_point(end)

        host = RecordingHost()
        session = LayoutSession(host, description, width, height)
        try:
            session.open()
        except LayoutError as e:
            console.print(f"[red]Invalid layout:[/] {escape(str(e))}")
            raise typer.Exit(1)

        state = PointerState()
        select_type = session.layout.select(x0, y0)
        session.replay(
            [
                PointerEvent(Pointer.DOWN, x0, y0),
                PointerEvent(Pointer.MOVE, x1, y1),
                PointerEvent(Pointer.UP, x1, y1),
            ],
            state,
        )

        if json_output:
            print(panels_json(host.surfaces))
            return

        if select_type is SelectType.NONE:
            console.print(f"[yellow]No splitter at ({x0}, {y0})[/]")
        else:
            console.print(f"Dragged [bold]{select_type.value}[/] splitter(s) from ({x0}, {y0}) to ({x1}, {y1})")
        console.print(panels_table(host.surfaces, f"{len(host.surfaces)} windows in {width}x{height}"))

    return app
