import logging
from datetime import date
from decimal import Decimal
from types import SimpleNamespace

import pytest

from enums.enums import ActivityKind, Crop
from services.ledger_service import (
    compute_employee_balance,
    compute_plantation_summary,
    crop_volumes,
    employee_activity,
    filter_due_employees,
    market_price_for,
    propose_harvest_rate,
    recent_entrepreneur_expenses,
    round_currency,
    settlement_amount,
)


def make_settings(**overrides):
    values = dict(
        pay_rate_hevea=75,
        pay_rate_cacao=0,
        market_price_hevea=360,
        market_price_cacao=2800,
        cacao_pay_ratio=0.3333,
    )
    values.update(overrides)
    return SimpleNamespace(**values)


def harvest(employee_id, weight, rate, crop=Crop.HEVEA, day=date(2024, 5, 1), harvest_id=None):
    return SimpleNamespace(
        harvest_id=harvest_id, employee_id=employee_id, weight_kg=weight,
        pay_rate=rate, crop=crop, date=day,
    )


def task(employee_id, amount, day=date(2024, 5, 1), description="Desbroce"):
    return SimpleNamespace(work_task_id=None, employee_id=employee_id, amount=amount, date=day,
                           description=description)


def advance(amount, employee_id=None, entrepreneur_id=None, day=date(2024, 5, 1), notes=None):
    return SimpleNamespace(advance_id=None, employee_id=employee_id, entrepreneur_id=entrepreneur_id,
                           amount=amount, date=day, notes=notes)


def employee(employee_id, crop=Crop.HEVEA, name=None):
    return SimpleNamespace(employee_id=employee_id, crop=crop, name=name or f"E{employee_id}")


class TestEmployeeBalance:
    def test_no_records_is_zero(self):
        assert compute_employee_balance(1, [], [], []) == 0

    def test_additive_and_order_invariant(self):
        harvests = [harvest(1, 10, 75), harvest(1, 2, 933), harvest(2, 100, 75)]
        tasks = [task(1, 1500), task(2, 999)]
        advances = [advance(2000, employee_id=1), advance(50000, entrepreneur_id=7)]

        expected = 10 * 75 + 2 * 933 + 1500 - 2000
        assert compute_employee_balance(1, harvests, tasks, advances) == expected
        assert compute_employee_balance(
            1, list(reversed(harvests)), list(reversed(tasks)), list(reversed(advances))
        ) == expected

    def test_entrepreneur_expenses_never_net_against_workers(self):
        advances = [advance(10000, entrepreneur_id=3)]
        assert compute_employee_balance(1, [harvest(1, 10, 75)], [], advances) == 750

    def test_rounds_once_per_aggregate(self):
        # 3 × 0.5 kg a 1 FCFA: redondeo por línea daría 3, por agregado 2 (1.5 -> 2)
        harvests = [harvest(1, Decimal("0.5"), 1) for _ in range(3)]
        assert compute_employee_balance(1, harvests, [], []) == 2

    def test_negative_balance_is_kept_signed(self):
        assert compute_employee_balance(1, [harvest(1, 10, 75)], [], [advance(1000, employee_id=1)]) == -250

    def test_settling_drives_balance_to_zero(self):
        harvests = [harvest(1, 37, 933)]
        tasks = [task(1, 2500)]
        advances = [advance(4000, employee_id=1)]
        due = compute_employee_balance(1, harvests, tasks, advances)
        assert due > 0

        advances.append(advance(settlement_amount(due), employee_id=1))
        assert compute_employee_balance(1, harvests, tasks, advances) == 0

    def test_settling_half_unit_balance_drives_to_zero(self):
        # 10.5 kg × 75 = 787.5 -> saldo 788; el remanente -0.5 debe redondear a 0
        harvests = [harvest(1, Decimal("10.5"), 75)]
        advances = []
        due = compute_employee_balance(1, harvests, [], advances)
        assert due == 788

        advances.append(advance(settlement_amount(due), employee_id=1))
        assert compute_employee_balance(1, harvests, [], advances) == 0

    def test_missing_number_contributes_zero_with_warning(self, caplog):
        harvests = [harvest(1, None, 75), harvest(1, float("nan"), 75), harvest(1, 4, 75)]
        with caplog.at_level(logging.WARNING):
            assert compute_employee_balance(1, harvests, [], []) == 300
        assert any("weight_kg" in r.getMessage() for r in caplog.records)

    def test_unknown_employee_id_is_zero(self):
        assert compute_employee_balance(None, [harvest(None, 10, 75)], [], []) == 0


class TestProposedRate:
    def test_hevea_uses_fixed_rate_regardless_of_prices(self):
        emp = employee(1, Crop.HEVEA)
        assert propose_harvest_rate(emp, make_settings()) == 75
        assert propose_harvest_rate(emp, make_settings(market_price_hevea=9999, market_price_cacao=1)) == 75

    def test_cacao_is_rounded_share_of_market_price(self):
        assert propose_harvest_rate(employee(1, Crop.CACAO), make_settings()) == 933

    def test_cacao_rounds_half_up(self):
        settings = make_settings(market_price_cacao=1001, cacao_pay_ratio=0.5)
        assert propose_harvest_rate(employee(1, Crop.CACAO), settings) == 501


class TestPlantationSummary:
    def test_reference_example(self):
        summary = compute_plantation_summary([harvest(1, 100, 75)], [], [], make_settings())
        assert summary.gross_worker_pay == 7500
        assert summary.gross_revenue == 36000
        assert summary.external_expenses == 0
        assert summary.profit == 28500

    def test_profit_identity_with_all_record_kinds(self):
        harvests = [harvest(1, 100, 75), harvest(2, 40, 933, crop=Crop.CACAO)]
        tasks = [task(1, 5000)]
        advances = [advance(3000, employee_id=1), advance(12000, entrepreneur_id=4)]
        s = compute_plantation_summary(harvests, tasks, advances, make_settings())

        assert s.gross_worker_pay == 7500 + 40 * 933 + 5000
        assert s.already_paid_to_workers == 3000
        assert s.external_expenses == 12000
        assert s.gross_revenue == 100 * 360 + 40 * 2800
        assert s.profit == s.gross_revenue - s.gross_worker_pay - s.external_expenses
        assert s.net_due_to_workers == s.gross_worker_pay - s.already_paid_to_workers

    def test_market_price_change_only_moves_revenue(self):
        harvests = [harvest(1, 100, 75)]
        before = compute_plantation_summary(harvests, [], [], make_settings())
        after = compute_plantation_summary(harvests, [], [], make_settings(market_price_hevea=400))

        assert harvests[0].pay_rate == 75
        assert after.gross_worker_pay == before.gross_worker_pay
        assert after.gross_revenue == 40000
        assert before.gross_revenue == 36000


class TestDueEmployees:
    def test_excludes_settled_and_preserves_order(self):
        employees = [employee(3), employee(1), employee(2), employee(4)]
        harvests = [harvest(1, 10, 75), harvest(2, 10, 75), harvest(3, 1, 75)]
        advances = [advance(750, employee_id=2), advance(100, employee_id=3)]

        due = filter_due_employees(employees, harvests, [], advances)

        assert [d.employee.employee_id for d in due] == [1]
        assert due[0].due_amount == 750

    def test_settlement_amount_never_negative(self):
        assert settlement_amount(-40) == 0
        assert settlement_amount(0) == 0
        assert settlement_amount(120) == 120


class TestAuxiliaryViews:
    def test_crop_volumes_include_every_crop(self):
        volumes = crop_volumes([harvest(1, 10, 75), harvest(2, Decimal("2.5"), 900, crop=Crop.CACAO),
                                harvest(1, 5, 75)])
        assert volumes == {Crop.HEVEA: Decimal("15"), Crop.CACAO: Decimal("2.5")}
        assert crop_volumes([]) == {Crop.HEVEA: 0, Crop.CACAO: 0}

    def test_activity_is_newest_first_and_signed(self):
        items = employee_activity(
            1,
            [harvest(1, 10, 75, day=date(2024, 5, 1))],
            [task(1, 2000, day=date(2024, 5, 3))],
            [advance(500, employee_id=1, day=date(2024, 5, 2))],
        )
        assert [i.kind for i in items] == [ActivityKind.TASK, ActivityKind.ADVANCE, ActivityKind.HARVEST]
        assert [i.amount for i in items] == [2000, -500, 750]
        assert items[1].label == "Anticipo"

    def test_activity_is_capped(self):
        harvests = [harvest(1, 1, 75, day=date(2024, 5, d)) for d in range(1, 21)]
        items = employee_activity(1, harvests, [], [], limit=10)
        assert len(items) == 10
        assert items[0].date == date(2024, 5, 20)

    def test_recent_entrepreneur_expenses(self):
        advances = [
            advance(100, entrepreneur_id=1, day=date(2024, 5, 1)),
            advance(200, employee_id=1, day=date(2024, 5, 9)),
            advance(300, entrepreneur_id=2, day=date(2024, 5, 5)),
        ]
        recent = recent_entrepreneur_expenses(advances, limit=10)
        assert [a.amount for a in recent] == [300, 100]


def test_unknown_crop_is_rejected_by_proposal():
    with pytest.raises(ValueError):
        propose_harvest_rate(employee(1, "COFFEE"), make_settings())


@pytest.mark.parametrize("value, expected", [
    ("787.5", 788),
    ("-0.5", 0),
    ("-1.5", -1),
    ("-0.51", -1),
    ("933.24", 933),
    ("0.49", 0),
])
def test_round_currency_sends_halves_up(value, expected):
    assert round_currency(Decimal(value)) == expected


@pytest.mark.parametrize("crop", list(Crop))
def test_every_crop_has_a_market_price(crop):
    settings = make_settings()
    assert market_price_for(crop, settings) > 0
