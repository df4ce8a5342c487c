# main.py
"""Main entry point for TradeLens."""
import asyncio
import logging
import sys
from pathlib import Path

from dotenv import load_dotenv

from src.analytics import compute_summary, generate_insights
from src.analytics.formatting import format_percentage, format_usd
from src.config.settings import Settings
from src.content import build_response, detect_ticker, extract_timeframe_days
from src.content.response_builder import ResponseBuilder, StructuredResponse
from src.content.topic_content import TopicContentSelector, load_topic_catalog
from src.market import ChartTimeRange, MockPriceService, detect_chart_ticker
from src.outlook import Outlook, OutlookSynthesizer
from src.preferences import PreferencesStore, UserPreferences
from src.trades import EmptyTradeDataError, MockTradeGenerator, TradeImporter, TradeStore
from src.trades.models import Trade


# Configure logging
logging.basicConfig(
    level=logging.INFO,
    format='[%(asctime)s] %(levelname)s: %(message)s',
    datefmt='%Y-%m-%d %H:%M:%S'
)
logger = logging.getLogger(__name__)

DEFAULT_QUESTION = "How is NVDA looking over the next month?"


def create_data_dirs(settings: Settings) -> None:
    """Create required data directories if they don't exist."""
    dirs = [
        Path(settings.trades.import_dir),
        Path(settings.preferences.path).parent,
    ]

    for dir_path in dirs:
        dir_path.mkdir(parents=True, exist_ok=True)

    logger.info("Data directories verified")


def print_startup_banner(settings: Settings) -> None:
    """Print system startup banner."""
    logger.info("=" * 60)
    logger.info(f"Starting {settings.system.name}")
    logger.info(f"Version: {settings.system.version}")
    logger.info("=" * 60)


def load_and_validate_config() -> Settings:
    """Load and validate configuration.

    Returns:
        Settings object loaded from YAML.

    Raises:
        SystemExit: If the config file is missing or cannot be parsed.
    """
    # Load environment variables
    load_dotenv()
    logger.info("✓ Loaded environment variables")

    # Check settings.yaml exists
    config_path = Path("config/settings.yaml")
    if not config_path.exists():
        logger.error("config/settings.yaml not found")
        sys.exit(1)

    # Load settings
    try:
        settings = Settings.from_yaml(config_path)
        logger.info("✓ Settings loaded from config/settings.yaml")
    except Exception as e:
        logger.error(f"Failed to parse settings.yaml: {e}")
        sys.exit(1)

    logging.getLogger().setLevel(settings.runtime.log_level.upper())

    # Create data directories
    create_data_dirs(settings)

    return settings


async def load_trades(settings: Settings) -> TradeStore:
    """Fill a TradeStore from the configured import file or from mock data.

    Args:
        settings: Loaded settings object.

    Returns:
        TradeStore holding the trade history.
    """
    store = TradeStore(generator=MockTradeGenerator(settings.trades))

    if settings.trades.import_file:
        importer = TradeImporter(store, settings.trades)
        summary = await importer.import_file(settings.trades.import_file)
        for detail in summary.details:
            logger.warning(detail)
        logger.info(f"✓ {summary.status_message}")
        return store

    try:
        await store.load_mock_trades()
    except EmptyTradeDataError as e:
        logger.warning(f"No mock trades available: {e}")
        return store

    logger.info(f"✓ Loaded {len(store)} mock trades")
    return store


def log_trade_overview(trades: list[Trade]) -> None:
    """Log the summary and the six insights for trades."""
    summary = compute_summary(trades)
    logger.info(
        f"Trades: {summary.total_trades} | Win rate: {format_percentage(summary.win_rate)} | "
        f"Avg hold: {summary.avg_hold_days:.1f} days | "
        f"Realized P/L: {format_usd(summary.realized_pnl_total)}"
    )
    logger.info(
        f"Best: {summary.best_ticker or '-'} | Worst: {summary.worst_ticker or '-'} | "
        f"Speculative: {format_percentage(summary.speculative_percent)}"
    )

    for insight in generate_insights(trades):
        logger.info(f"{insight.title}: {insight.detail}")


def answer_question(
    question: str,
    trades: list[Trade],
    settings: Settings,
    preferences: UserPreferences,
) -> StructuredResponse:
    """Build the sectioned answer to question.

    Args:
        question: Free-text question.
        trades: Trade history used for the personal sections.
        settings: Loaded settings object.
        preferences: Saved user preferences.

    Returns:
        StructuredResponse for the question.
    """
    simple = settings.content.simple_mode or preferences.simple_mode
    if settings.content.topics_path:
        selector = TopicContentSelector(load_topic_catalog(Path(settings.content.topics_path)))
        return ResponseBuilder(selector).build(question, trades, simple)
    return build_response(question, trades, simple)


def outlook_for_question(
    question: str,
    trades: list[Trade],
    settings: Settings,
    preferences: UserPreferences,
) -> Outlook | None:
    """Synthesize an outlook for the ticker a question mentions, if any."""
    ticker = detect_ticker(question)
    if ticker is None:
        return None

    days = extract_timeframe_days(question, default=settings.outlook.default_timeframe_days)
    synthesizer = OutlookSynthesizer.from_settings(settings.outlook)
    return synthesizer.synthesize(ticker, days, preferences, trades)


def log_outlook(outlook: Outlook) -> None:
    """Log the fields of an outlook."""
    logger.info(
        f"Outlook {outlook.ticker} ({outlook.timeframe_days}d): {outlook.sentiment.label} | "
        f"Volatility band: {format_percentage(outlook.volatility_band)} | "
        f"Historical hit rate: {format_percentage(outlook.historical_hit_rate)}"
    )
    logger.info(f"  {outlook.sentiment.description}")
    for driver in outlook.key_drivers:
        logger.info(f"  - {driver}")
    for note in (outlook.personal_context, outlook.volatility_warning, outlook.timeframe_note):
        if note:
            logger.info(f"  * {note}")


async def main(argv: list[str] | None = None) -> None:
    """Main entry point."""
    argv = sys.argv[1:] if argv is None else argv
    question = " ".join(argv).strip() or DEFAULT_QUESTION

    settings = load_and_validate_config()
    print_startup_banner(settings)

    preferences = await PreferencesStore(settings.preferences).load()
    logger.info(
        f"✓ Preferences loaded ({preferences.trading_style.label}, "
        f"{preferences.risk_tolerance.label} risk)"
    )

    store = await load_trades(settings)
    trades = store.trades
    log_trade_overview(trades)

    response = answer_question(question, trades, settings, preferences)
    logger.info(f"Question: {response.query}")
    for line in response.to_text().splitlines():
        logger.info(line)

    outlook = outlook_for_question(question, trades, settings, preferences)
    if outlook is not None:
        log_outlook(outlook)

    chart_ticker = detect_chart_ticker(question)
    if chart_ticker is not None:
        history = MockPriceService().price_history(chart_ticker, ChartTimeRange.ONE_MONTH)
        if history is not None:
            logger.info(
                f"{history.ticker} 1M: {format_usd(history.current_price)} "
                f"({history.change_percent:+.2f}%)"
            )


if __name__ == "__main__":
    asyncio.run(main())
