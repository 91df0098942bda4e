"""Enumerations used by the v5 endpoints."""

from enum import Enum, IntEnum


class AccountType(str, Enum):
    UNIFIED = "UNIFIED"
    NORMAL = "CONTRACT"


class MarginMode(str, Enum):
    REGULAR = "REGULAR_MARGIN"
    PORTFOLIO = "PORTFOLIO_MARGIN"


class CategoryV5(str, Enum):
    SPOT = "spot"
    LINEAR = "linear"
    INVERSE = "inverse"
    OPTION = "option"


class SymbolV5(str, Enum):
    # USDT perpetual
    BTCUSDT = "BTCUSDT"
    ETHUSDT = "ETHUSDT"
    # USDC perpetual
    BTCPERP = "BTCPERP"
    ETHPERP = "ETHPERP"
    # inverse perpetual
    BTCUSD = "BTCUSD"
    ETHUSD = "ETHUSD"
    # inverse futures
    BTCUSDH23 = "BTCUSDH23"
    BTCUSDM23 = "BTCUSDM23"
    BTCUSDU23 = "BTCUSDU23"
    BTCUSDZ23 = "BTCUSDZ23"
    # spot
    ETHUSDC = "ETHUSDC"


class TriggerDirection(IntEnum):
    RISE = 1
    FALL = 2


class IsLeverage(IntEnum):
    """Spot only: 0 for spot trading, 1 for margin trading."""

    FALSE = 0
    TRUE = 1


class OrderFilter(str, Enum):
    ORDER = "Order"
    STOP_ORDER = "StopOrder"
    TP_SL_ORDER = "tpslOrder"


class TriggerBy(str, Enum):
    LAST_PRICE = "LastPrice"
    INDEX_PRICE = "IndexPrice"
    MARK_PRICE = "MarkPrice"


class PositionIdx(IntEnum):
    ONE_WAY = 0
    HEDGE_BUY = 1
    HEDGE_SELL = 2


class ContractType(str, Enum):
    INVERSE_PERPETUAL = "InversePerpetual"
    LINEAR_PERPETUAL = "LinearPerpetual"
    INVERSE_FUTURES = "InverseFutures"


class InstrumentStatus(str, Enum):
    # linear and inverse
    PENDING = "Pending"
    TRADING = "Trading"
    SETTLING = "Settling"
    CLOSED = "Closed"
    # option
    WAITING_ONLINE = "WAITING_ONLINE"
    ONLINE = "ONLINE"
    DELIVERING = "DELIVERING"
    OFFLINE = "OFFLINE"
    # spot
    AVAILABLE = "1"


class OptionsType(str, Enum):
    CALL = "Call"
    PUT = "Put"


class Innovation(str, Enum):
    FALSE = "0"
    TRUE = "1"


class PositionMode(IntEnum):
    MERGED_SINGLE = 0
    BOTH_SIDES = 3


class ExecTypeV5(str, Enum):
    TRADE = "Trade"
    BUST_TRADE = "BustTrade"
    SESSION_SETTLE_PNL = "SessionSettlePnL"
    SETTLE = "Settle"


class TransferStatusV5(str, Enum):
    SUCCESS = "SUCCESS"
    PENDING = "PENDING"
    FAILED = "FAILED"


class AccountTypeV5(str, Enum):
    CONTRACT = "CONTRACT"
    SPOT = "SPOT"
    INVESTMENT = "INVESTMENT"
    OPTION = "OPTION"
    UNIFIED = "UNIFIED"
    FUND = "FUND"


class UnifiedMarginStatus(IntEnum):
    REGULAR = 1
    UNIFIED_MARGIN = 2
    UNIFIED_TRADE = 3