"""
Tests for profit/ROI derivation and the validity rule.
"""

from boxoffice.metrics import derive_metrics, is_valid_record


def test_derive_metrics_profitable():
	metrics = derive_metrics(budget=1_000_000, gross=5_000_000)
	assert metrics.profit == 4_000_000
	assert metrics.profit_margin == 400
	assert metrics.roi == 5


def test_derive_metrics_loss():
	metrics = derive_metrics(budget=200, gross=50)
	assert metrics.profit == -150
	assert metrics.profit_margin == -75
	assert metrics.roi == 0.25


def test_derive_metrics_zero_budget_guarded():
	metrics = derive_metrics(budget=0, gross=100)
	assert metrics.profit == 100
	assert metrics.profit_margin == 0
	assert metrics.roi == 0


def test_is_valid_record():
	assert is_valid_record(1, 1, 1901)
	assert not is_valid_record(0, 1, 2000)
	assert not is_valid_record(1, 0, 2000)
	assert not is_valid_record(1, 1, None)
	assert not is_valid_record(1, 1, 1900)
