"""Catalog commands: exercises, catalog-info."""

from typing import Annotated, Optional

import typer

from ...core.catalog.registry import complementary_muscles, get_catalog
from ...core.config import BODY_PARTS
from ...io.serializers import ValidationError, parse_equipment_list, parse_muscle_list
from .. import views
from ..app import EquipmentOption, app


@app.command()
def exercises(
    muscle: Annotated[
        Optional[str],
        typer.Option("--muscle", "-m", help="Comma-separated target muscles, e.g. 'lats,biceps'"),
    ] = None,
    equipment: EquipmentOption = None,
    exclude_equipment: Annotated[
        Optional[str],
        typer.Option("--exclude-equipment", "-x", help="Comma-separated equipment to exclude"),
    ] = None,
    body_part: Annotated[
        Optional[str],
        typer.Option("--body-part", "-b", help="Body part, e.g. 'upper legs'"),
    ] = None,
    search: Annotated[
        Optional[str],
        typer.Option("--search", "-s", help="Case-insensitive name search"),
    ] = None,
    limit: Annotated[int, typer.Option("--limit", help="Results per page")] = 20,
    offset: Annotated[int, typer.Option("--offset", help="Results to skip")] = 0,
) -> None:
    """
    Search the exercise catalog.
    """
    try:
        muscles = parse_muscle_list(muscle)
        equipment_list = parse_equipment_list(equipment)
        excluded = parse_equipment_list(exclude_equipment)
        if body_part is not None and body_part.strip().lower() not in BODY_PARTS:
            raise ValidationError(f"Unknown body part: {body_part}")
        result = get_catalog().search(
            target_muscles=muscles,
            equipments=equipment_list,
            exclude_equipments=excluded,
            body_parts=[body_part.strip().lower()] if body_part else None,
            search_term=search,
            limit=limit,
            offset=offset,
        )
    except (ValidationError, ValueError) as e:
        views.print_error(str(e))
        raise typer.Exit(1)

    views.print_search_result(result, offset)

    if muscles and len(muscles) == 1:
        pairs = complementary_muscles(muscles[0])
        if pairs:
            views.print_info(f"Pairs well with: {', '.join(pairs)}")


@app.command(name="catalog-info")
def catalog_info() -> None:
    """
    Show catalog size and the muscles, body parts and equipment in use.
    """
    meta = get_catalog().metadata()
    views.console.print(f"[bold]Exercises:[/bold] {meta['total_exercises']}")
    views.console.print(f"[bold]Target muscles:[/bold] {', '.join(meta['target_muscles'])}")
    views.console.print(f"[bold]Body parts:[/bold] {', '.join(meta['body_parts'])}")
    views.console.print(f"[bold]Equipment:[/bold] {', '.join(meta['equipments'])}")
