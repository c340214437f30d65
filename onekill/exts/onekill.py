"""Check how likely a deck is to open on a single low HP basic."""

from __future__ import annotations

import logging
from datetime import datetime as dt
from datetime import timezone
from io import BytesIO

from interactions import (
    Client,
    Embed,
    Extension,
    File,
    OptionType,
    SlashContext,
    slash_command,
    slash_option,
)
from matplotlib import pyplot as plt

from onekill.config import CONFIG
from onekill.util import (
    DECK_SIZE,
    DRAW_SIZE,
    DeckEvaluation,
    ValidationError,
    evaluate,
    field_labels,
    formula_text,
    normalize,
    parse_integer,
    probability_curve,
)

logger = logging.getLogger(__name__)

SAFE = (126, 196, 96)
INVALID = (198, 43, 43)
CURVE = (178, 178, 255)


def rgb_to_int(rgb: tuple[int, int, int]) -> int:
    """Convert an rgb tuple to an integer.

    Args:
    ----
    rgb (tuple): RGB color to convert
    """
    return (rgb[0] << 16) + (rgb[1] << 8) + rgb[2]


def show(value: int | None, error: ValidationError | None) -> str:
    """Format a field value with its error underneath."""
    shown = "?" if value is None else str(value)
    if error:
        return f"{shown}\n{error.message}"
    return shown


def build_check_embed(evaluation: DeckEvaluation) -> Embed:
    """Create the embed showing one evaluation.

    Args:
    ----
    evaluation (DeckEvaluation): The evaluated inputs
    """
    threshold = "?" if evaluation.hp_threshold is None else evaluation.hp_threshold
    low_label, high_label = field_labels(evaluation.hp_threshold)
    return (
        Embed(
            title="One-kill chance",
            description=(
                f"Chance that a {DRAW_SIZE} card hand from a {DECK_SIZE} card deck, "
                f"holding at least one basic Pokémon, holds exactly one basic "
                f"and it has HP {threshold} or less"
            ),
            timestamp=dt.now(tz=timezone.utc),
            color=rgb_to_int(INVALID if evaluation.has_errors else SAFE),
        )
        .add_field(
            "HP threshold",
            show(evaluation.hp_threshold, evaluation.hp_threshold_error),
            inline=True,
        )
        .add_field(
            low_label, show(evaluation.low_hp_count, evaluation.low_hp_error), inline=True
        )
        .add_field(
            high_label, show(evaluation.high_hp_count, evaluation.high_hp_error), inline=True
        )
        .add_field("Other cards", show(evaluation.other_count, None), inline=True)
        .add_field("Total", show(evaluation.total, evaluation.total_error), inline=True)
        .add_field("Chance", evaluation.display_probability(), inline=False)
        .add_field("Formula", formula_text(), inline=False)
        .set_footer("The HP threshold only changes the labels, not the result")
    )


def render_curve(curve: list[float], high_hp: int, hp_threshold: int | None) -> bytes:
    """Plot the chance for each low HP count as a png.

    Args:
    ----
    curve (list): Chance for each low HP count, starting from zero
    high_hp (int): The number of high HP basics the curve was made for
    hp_threshold (int): The HP threshold, only used for labels
    """
    low_label, _ = field_labels(hp_threshold)
    figure = plt.figure()
    plt.plot(list(range(len(curve))), [chance * 100 for chance in curve])
    plt.xlabel(low_label)
    plt.ylabel("Probability (%)")
    plt.title(f"One-kill chance with {high_hp} high HP basics")
    plt.grid(visible=True)
    with BytesIO() as figure_bytes:
        plt.savefig(figure_bytes, format="png")
        data = figure_bytes.getvalue()
    plt.close(figure)
    return data


async def send_check(
    ctx: SlashContext,
    hp_threshold: str | None = None,
    low_hp: str | None = None,
    high_hp: str | None = None,
) -> DeckEvaluation:
    """Evaluate the typed fields, falling back to the configured defaults, and reply.

    Args:
    ----
    ctx (SlashContext): The command context to reply to
    hp_threshold (str): The HP threshold as typed
    low_hp (str): Basics with HP at or below the threshold as typed
    high_hp (str): Basics with HP above the threshold as typed
    """
    evaluation = evaluate(
        hp_threshold or CONFIG.DEFAULT_HP_THRESHOLD,
        low_hp or CONFIG.DEFAULT_LOW_HP,
        high_hp or CONFIG.DEFAULT_HIGH_HP,
    )
    logger.info(
        "Check by %s: %s/%s/%s -> %s",
        ctx.author_id,
        evaluation.hp_threshold,
        evaluation.low_hp_count,
        evaluation.high_hp_count,
        evaluation.display_probability(),
    )
    await ctx.send(embeds=build_check_embed(evaluation))
    return evaluation


async def send_curve(
    ctx: SlashContext, high_hp: str | None = None, hp_threshold: str | None = None
) -> None:
    """Plot the chance for every low HP count and reply, or refuse a bad high HP count.

    Args:
    ----
    ctx (SlashContext): The command context to reply to
    high_hp (str): Basics with HP above the threshold as typed
    hp_threshold (str): The HP threshold as typed
    """
    high_count = parse_integer(normalize(high_hp or CONFIG.DEFAULT_HIGH_HP))
    threshold = parse_integer(normalize(hp_threshold or CONFIG.DEFAULT_HP_THRESHOLD))
    if high_count is None or high_count < 0 or high_count > DECK_SIZE:
        await ctx.send(f"Invalid high HP basic count (0-{DECK_SIZE})", ephemeral=True)
        return

    curve = probability_curve(high_count)
    best = max(range(len(curve)), key=lambda low: curve[low])
    logger.info("Curve by %s for %s high HP basics", ctx.author_id, high_count)

    e = (
        Embed(
            title=f"One-kill chance with {high_count} high HP basics",
            timestamp=dt.now(tz=timezone.utc),
            color=rgb_to_int(CURVE),
        )
        .add_field("Highest chance", f"{curve[best] * 100:.2f}%", inline=True)
        .add_field("Low HP basics", str(best), inline=True)
        .set_image("attachment://curve.png")
    )
    await ctx.send(
        embeds=e,
        files=File(BytesIO(render_curve(curve, high_count, threshold)), "curve.png"),
    )


class OneKillExt(Extension):
    """Check how likely a deck is to open on a single low HP basic."""

    def __init__(self: OneKillExt, client: Client) -> None:
        """Check how likely a deck is to open on a single low HP basic.

        Args:
        ----
        client (Client): The discord bot client
        """
        self.client: Client = client

    @slash_command()
    async def onekill(self: OneKillExt, _: SlashContext) -> None:
        """Check how likely a deck is to open on a single low HP basic."""

    @onekill.subcommand()
    @slash_option("hp_threshold", "Only changes the labels", OptionType.STRING)
    @slash_option("low_hp", "Basic Pokémon with HP at or below the threshold", OptionType.STRING)
    @slash_option("high_hp", "Basic Pokémon with HP above the threshold", OptionType.STRING)
    async def check(
        self: OneKillExt,
        ctx: SlashContext,
        hp_threshold: str | None = None,
        low_hp: str | None = None,
        high_hp: str | None = None,
    ) -> None:
        """Get the chance your opening hand's only basic is a low HP one."""
        await send_check(ctx, hp_threshold, low_hp, high_hp)

    @onekill.subcommand()
    @slash_option("high_hp", "Basic Pokémon with HP above the threshold", OptionType.STRING)
    @slash_option("hp_threshold", "Only changes the labels", OptionType.STRING)
    async def curve(
        self: OneKillExt,
        ctx: SlashContext,
        high_hp: str | None = None,
        hp_threshold: str | None = None,
    ) -> None:
        """View how the chance changes with the number of low HP basics."""
        await send_curve(ctx, high_hp, hp_threshold)


def setup(client: Client) -> Extension:
    """Create the extension.

    Args:
    ----
    client (Client): The discord bot client
    """
    return OneKillExt(client)
