"""CLI commands for order requests and order views."""

from __future__ import annotations

import json

import click

from ecshop.application.dto import UpdateOrderStatusRequest
from ecshop.application.payload import (
    order_summary_to_dict,
    parse_create_order_request,
    parse_order_response,
)
from ecshop.domain.exceptions import DomainException, ValidationError
from ecshop.domain.model.order import OrderStatus
from ecshop.infrastructure.bootstrap import order_input_validator


_MAX_CODE_DIGITS = 9


def _load_json(stream) -> object:
    try:
        return json.load(stream)
    except ValueError as exc:
        # UnicodeDecodeError and JSONDecodeError are both ValueError.
        name = getattr(stream, "name", "input")
        raise click.ClickException(f"Invalid JSON in {name}: {exc}")


def _format_violations(exc: ValidationError) -> str:
    lines = [f"Request rejected ({len(exc.violations)} problem(s)):"]
    lines.extend(f"  - {v}" for v in exc.violations)
    return "\n".join(lines)


@click.command("validate")
@click.argument("payload", type=click.File("r", encoding="utf-8"))
def order_validate(payload) -> None:
    """Validate an order creation request (JSON file, or - for stdin)."""
    validator = order_input_validator()

    try:
        request = parse_create_order_request(_load_json(payload))
        validator.validate_creation(request)
    except ValidationError as exc:
        raise click.ClickException(_format_violations(exc))
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"Order request accepted ({len(request.items)} item(s))")


@click.command("status")
@click.argument("value")
def order_status(value: str) -> None:
    """Validate a status value (name or numeric code)."""
    raw: object = value
    if value.isascii() and value.isdigit() and len(value) <= _MAX_CODE_DIGITS:
        raw = int(value)
    validator = order_input_validator()

    try:
        status = validator.validate_status_update(UpdateOrderStatusRequest(status=raw))
    except ValidationError as exc:
        raise click.ClickException(_format_violations(exc))

    click.echo(f"{status.name} -> {status.display_text}")


@click.command("statuses")
def order_statuses() -> None:
    """List the recognized order statuses."""
    click.echo(f"  {'Code':>4} {'Name':<12} {'Text':<12}")
    click.echo(f"  {'-'*30}")
    for status in OrderStatus:
        click.echo(f"  {status.code:>4} {status.name:<12} {status.display_text:<12}")


@click.command("summarize")
@click.argument("order", type=click.File("r", encoding="utf-8"))
def order_summarize(order) -> None:
    """Print the list-view summary of an order (JSON file, or - for stdin)."""
    try:
        view = parse_order_response(_load_json(order))
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(json.dumps(order_summary_to_dict(view.summary()), indent=2))
