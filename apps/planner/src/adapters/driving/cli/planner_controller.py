"""Planner CLI Controller

Driving Adapter: translates CLI commands into use case calls
"""

from injector import Injector

from libs.planning.src.ports.compare_strategies_port import CompareStrategiesPort
from libs.planning.src.ports.generate_ai_strategy_port import GenerateAiStrategyPort
from libs.portfolio.src.domain.services.projection_engine import (
    format_compact_currency,
)
from libs.portfolio.src.ports.get_cash_flow_projection_port import (
    GetCashFlowProjectionPort,
)
from libs.portfolio.src.ports.get_portfolio_summary_port import (
    GetPortfolioSummaryPort,
)
from libs.portfolio.src.ports.refresh_snapshots_port import RefreshSnapshotsPort
from libs.portfolio.src.ports.token_snapshot_provider_port import (
    TokenSnapshotProviderPort,
)
from libs.rebalancing.src.ports.advise_rebalance_port import AdviseRebalancePort
from libs.rebalancing.src.ports.generate_ai_rebalance_plan_port import (
    GenerateAiRebalancePlanPort,
)
from libs.risk.src.ports.get_optimization_recommendations_port import (
    GetOptimizationRecommendationsPort,
)
from libs.risk.src.ports.get_risk_report_port import GetRiskReportPort
from libs.shared.src.dtos.token.token_snapshot_dto import TokenSnapshotDTO
from libs.shared.src.enums.rebalance_goal import RebalanceGoal
from libs.shared.src.enums.risk_tolerance import RiskTolerance
from libs.shared.src.errors.domain_error import DomainError

SEPARATOR = "=" * 50


class PlannerController:
    """Exit planner CLI controller"""

    def __init__(self, injector: Injector) -> None:
        self._injector = injector

    def _load_tokens(self) -> list[TokenSnapshotDTO]:
        return self._injector.get(TokenSnapshotProviderPort).get_tokens()

    def _find_token(self, symbol: str) -> TokenSnapshotDTO | None:
        wanted = str(symbol).upper()
        for token in self._load_tokens():
            if (token.get("symbol") or "").upper() == wanted:
                return token
        print(f"❌ Token not found: {symbol}")
        return None

    def summary(self) -> None:
        """Portfolio totals, top opportunities and health"""
        result = self._injector.get(GetPortfolioSummaryPort).execute(
            self._load_tokens()
        )
        totals = result["totals"]
        health = result["health"]

        print("\n" + SEPARATOR)
        print(f"📊 Portfolio Summary ({result['token_count']} tokens)")
        print(SEPARATOR)
        print(f"Current value: ${totals['total']:,.2f}")
        print(f"Target value:  ${totals['target']:,.2f}")
        print(
            f"Growth:        {totals['growth_multiplier']:.2f}x "
            f"({totals['growth_percentage']:+.1f}%)"
        )

        highest = totals["highest_potential_token"]
        if highest:
            print(f"Highest potential: {highest.get('symbol', '?')}")

        if result["top_opportunities"]:
            print("\n🚀 Top opportunities:")
            for i, opportunity in enumerate(result["top_opportunities"], 1):
                print(
                    f"   {i}. {opportunity['symbol']} | "
                    f"{opportunity['potential_multiplier']:.1f}x"
                )

        print(f"\n🩺 Health score: {health['score']}/100")
        for issue in health["issues"]:
            print(f"   • {issue}")
        for suggestion in health["suggestions"]:
            print(f"   → {suggestion}")
        print(SEPARATOR)

    def compare(self, symbol: str = "") -> None:
        """Selected exit strategy vs. selling everything at target

        Args:
            symbol: Only compare this token (default: all)
        """
        tokens = self._load_tokens()
        if symbol:
            tokens = [
                t
                for t in tokens
                if (t.get("symbol") or "").upper() == str(symbol).upper()
            ]

        for item in self._injector.get(CompareStrategiesPort).execute(tokens):
            comparison = item["comparison"]
            selected = comparison["selected"]
            benchmark = comparison["benchmark"]
            print(f"\n🎯 {item['symbol']}")
            print(f"   Selected strategy: ${selected['total_exit_value']:,.2f}")
            for stage in selected.get("profit_stages", []):
                print(
                    f"      • {stage['percentage']:.0f}% at "
                    f"{stage['multiplier']:.1f}x → ${stage['value']:,.2f}"
                )
            print(f"   All at target:     ${benchmark['total_exit_value']:,.2f}")
            print(
                f"   Winner: {comparison['winner'].value} "
                f"(by ${comparison['difference']:,.2f}, "
                f"{comparison['difference_percentage']:.1f}%)"
            )

    def projection(self) -> None:
        """Cash-flow timeline bucketed by projected portfolio value"""
        result = self._injector.get(GetCashFlowProjectionPort).execute(
            self._load_tokens()
        )

        print("\n" + SEPARATOR)
        print(
            f"💵 Cash-flow projection from "
            f"{format_compact_currency(result['portfolio_total'])}"
            f" (bucket {format_compact_currency(result['bucket_size'])})"
        )
        print(SEPARATOR)
        for bucket in result["buckets"]:
            symbols = ", ".join(t["symbol"] for t in bucket["tokens"])
            print(
                f"{bucket['label']:>10} | "
                f"{format_compact_currency(bucket['total_cash_out']):>10} | {symbols}"
            )
        print(SEPARATOR)

    def rebalance(self) -> None:
        """Heuristic rebalance candidates and smart rotation"""
        advice = self._injector.get(AdviseRebalancePort).execute(self._load_tokens())
        candidates = advice["candidates"]
        rotation = advice["rotation"]

        print("\n" + SEPARATOR)
        print("⚖️  Rebalance candidates")
        print(SEPARATOR)
        for title, key in (
            ("Take profit", "profit_candidates"),
            ("Reduce risk", "risk_candidates"),
            ("Underperforming", "underperform_candidates"),
        ):
            symbols = ", ".join(c["symbol"] for c in candidates[key]) or "-"
            print(f"{title}: {symbols}")
        buy = candidates["buy_candidate"]
        print(f"Buy: {buy['symbol'] if buy else '-'}")

        print(f"\n🔄 {rotation['summary']}")
        for action in rotation["actions"]:
            print(
                f"   {action['action'].value} {action['symbol']} "
                f"${action['amount']:,.2f} | {action['reason']}"
            )
        print(SEPARATOR)

    def ai_rebalance(self, goal: str = "profit") -> None:
        """AI-authored sell/buy plan

        Args:
            goal: profit, risk or accelerate
        """
        try:
            rebalance_goal = RebalanceGoal[str(goal).upper()]
        except KeyError:
            print(f"❌ Unknown goal: {goal} (profit, risk, accelerate)")
            return

        try:
            plan = self._injector.get(GenerateAiRebalancePlanPort).execute(
                self._load_tokens(), rebalance_goal
            )
        except DomainError as e:
            print(f"❌ [{e.code}] {e.message}")
            return

        print(f"\n🤖 {plan['rationale']}")
        for sell in plan["sells"]:
            print(f"   SELL {sell['percentage']:.0f}% of {sell['symbol']}")
        if plan["buy"]:
            print(f"   BUY {plan['buy']['symbol']}")

    def ai_strategy(
        self,
        symbol: str,
        desired_profit: float,
        risk_tolerance: str = "moderate",
    ) -> None:
        """AI-authored exit stages for one token

        Args:
            symbol: Token symbol
            desired_profit: Profit to realize, in USD
            risk_tolerance: conservative, moderate or aggressive
        """
        token = self._find_token(symbol)
        if token is None:
            return
        try:
            tolerance = RiskTolerance[str(risk_tolerance).upper()]
        except KeyError:
            print(f"❌ Unknown risk tolerance: {risk_tolerance}")
            return

        try:
            result = self._injector.get(GenerateAiStrategyPort).execute(
                token, float(desired_profit), tolerance
            )
        except DomainError as e:
            print(f"❌ [{e.code}] {e.message}")
            return

        print(f"\n🤖 Exit stages for {token.get('symbol', '?')}")
        for stage in result["stages"]:
            print(f"   • {stage['percentage']:.0f}% at {stage['multiplier']:.2f}x")
        if result["warning"]:
            print(f"⚠️  {result['warning']}")

    def risk(self) -> None:
        """Risk metrics, performance analytics and concentration"""
        report = self._injector.get(GetRiskReportPort).execute(self._load_tokens())
        metrics = report["metrics"]
        performance = report["performance"]

        print("\n" + SEPARATOR)
        print("🛡️  Risk report")
        print(SEPARATOR)
        print(f"Volatility:      {metrics['volatility']:.4f}")
        print(
            f"Sharpe / Sortino: {metrics['sharpe_ratio']:.2f} / "
            f"{metrics['sortino_ratio']:.2f}"
        )
        print(f"Max drawdown:    {metrics['max_drawdown'] * 100:.1f}%")
        print(
            f"VaR 95:          {metrics['var_95'] * 100:.1f}% "
            f"(CVaR {metrics['cvar_95'] * 100:.1f}%, "
            f"normal {metrics['parametric_var_95'] * 100:.1f}%)"
        )
        print(f"Avg correlation: {metrics['correlation']:.2f}")
        print(f"Concentration:   {metrics['concentration_risk']:.1f}%")
        print(f"Win rate:        {performance['win_rate'] * 100:.0f}%")
        print(f"Profit factor:   {performance['profit_factor']:.2f}")

        print("\nRisk contribution:")
        for symbol, share in report["heatmap"]["risk_contribution"].items():
            print(f"   {symbol}: {share:.1f}%")
        print(SEPARATOR)

    def optimize(self) -> None:
        """Conservative, balanced, aggressive and risk-parity plans"""
        try:
            plans = self._injector.get(GetOptimizationRecommendationsPort).execute(
                self._load_tokens()
            )
        except DomainError as e:
            print(f"❌ [{e.code}] {e.message}")
            return

        for name, plan in plans.items():
            actions = plan["rebalance_actions"]
            print(f"\n📐 {name} (confidence {plan['confidence']:.0%})")
            for action in actions["sells"] + actions["buys"]:
                print(
                    f"   {action['action'].value} {action['symbol']} "
                    f"{action['percentage']:.1f}pp | {action['reason']}"
                )
            if not actions["sells"] and not actions["buys"]:
                print("   No changes")

    def refresh(self) -> None:
        """Fetch live quotes and store the refreshed snapshots"""
        provider = self._injector.get(TokenSnapshotProviderPort)
        tokens = provider.get_tokens()
        refreshed = self._injector.get(RefreshSnapshotsPort).execute(tokens)
        provider.save_tokens(refreshed)
        print(f"✅ Refreshed {len(refreshed)} tokens")
