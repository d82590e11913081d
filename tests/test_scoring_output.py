import json

import pandas as pd
import pytest

from config.constants import SAMPLE_PORTFOLIO_FILE, SAMPLE_STOCKS_FILE
from metric_scoring.scorers.scoring_output import (
    StockScoreGenerator,
    load_holdings,
    load_stock_profiles,
)
from tests.conftest import DATA_DIR


@pytest.fixture
def stock_file(tmp_path):
    payload = [
        {
            'ticker': 'SYK', 'name': 'Stryker Corporation', 'industry': 'Healthcare',
            'metrics': {
                'performance': {'details': {'revenueGrowth': 13.5, 'profitMargin': 21.2, 'returnOnCapital': 14.8}},
                'stability': {'details': {'volatility': 0.95, 'beta': 1.0, 'dividendConsistency': 'High'}},
                'value': {'details': {'peRatio': 24.2, 'pbRatio': 3.8, 'dividendYield': 0.8}},
                'momentum': {'details': {'threeMonthReturn': 7.2, 'relativePerformance': 2.2, 'rsi': 60}},
            },
        },
        {
            'ticker': 'ALGN', 'name': 'Align Technology', 'industry': 'Healthcare',
            'metrics': {
                'performance': {'revenueGrowth': 17.5, 'profitMargin': 19.8, 'returnOnCapital': 15.2},
                'stability': {'volatility': 1.35, 'beta': 1.4, 'dividendConsistency': 'N/A'},
                'value': {'peRatio': 28.2, 'pbRatio': 4.2, 'dividendYield': 'N/A'},
                'momentum': {'threeMonthReturn': 9.5, 'relativePerformance': 4.5, 'rsi': 65},
            },
        },
    ]
    path = tmp_path / 'stocks.json'
    path.write_text(json.dumps(payload), encoding='utf-8')
    return path


def test_load_stock_profiles(stock_file):
    stocks = load_stock_profiles(stock_file)
    assert [s.ticker for s in stocks] == ['SYK', 'ALGN']
    assert stocks[1].metrics.value.dividend_yield is None


def test_load_stock_profiles_keyed_by_ticker(tmp_path, stock_file):
    stocks = json.loads(stock_file.read_text(encoding='utf-8'))
    keyed = {s.pop('ticker'): s for s in stocks}
    path = tmp_path / 'keyed.json'
    path.write_text(json.dumps(keyed), encoding='utf-8')
    assert sorted(s.ticker for s in load_stock_profiles(path)) == ['ALGN', 'SYK']


def test_load_stock_profiles_rejects_bad_rsi(tmp_path, stock_file):
    stocks = json.loads(stock_file.read_text(encoding='utf-8'))
    stocks[0]['metrics']['momentum']['details']['rsi'] = 130
    path = tmp_path / 'bad.json'
    path.write_text(json.dumps(stocks), encoding='utf-8')
    with pytest.raises(ValueError):
        load_stock_profiles(path)


def test_load_holdings(tmp_path, stock_file):
    stocks = load_stock_profiles(stock_file)
    path = tmp_path / 'portfolio.json'
    path.write_text(json.dumps({'holdings': [{'ticker': 'syk', 'value': 1000}]}), encoding='utf-8')

    holdings = load_holdings(path, stocks)
    assert len(holdings) == 1
    assert holdings[0].stock.ticker == 'SYK'
    assert holdings[0].value == 1000


def test_load_holdings_unknown_ticker(tmp_path, stock_file):
    path = tmp_path / 'portfolio.json'
    path.write_text(json.dumps([{'ticker': 'NOPE', 'value': 10}]), encoding='utf-8')
    with pytest.raises(ValueError, match='NOPE'):
        load_holdings(path, load_stock_profiles(stock_file))


class TestGenerator:

    def test_generate_frame_and_file(self, tmp_path, stock_file, tables):
        out_dir = tmp_path / 'out'
        generator = StockScoreGenerator(data_dir=tmp_path, output_dir=out_dir, tables=tables)

        df, output_path = generator.generate(stock_file.name)

        assert isinstance(df, pd.DataFrame)
        assert list(df['ticker']) == ['SYK', 'ALGN']
        assert df.loc['SYK', 'stability'] == 87
        assert df.loc['SYK', 'overall'] == 83
        assert df.loc['SYK', 'stability_rating'] == 'High'

        assert output_path.parent == out_dir
        assert output_path.name.startswith('stock_scores_')
        saved = json.loads(output_path.read_text(encoding='utf-8'))
        assert saved['metadata']['stock_count'] == 2
        assert saved['metadata']['source_stock_data'] == 'stocks.json'
        assert saved['scores'][0]['scores']['stability'] == 87

    def test_ticker_filter_without_saving(self, tmp_path, stock_file, tables):
        generator = StockScoreGenerator(data_dir=tmp_path, output_dir=tmp_path / 'out', tables=tables)
        df, output_path = generator.generate(stock_file.name, tickers=['algn'], save=False)
        assert list(df['ticker']) == ['ALGN']
        assert output_path is None
        assert not (tmp_path / 'out').exists()

    def test_ticker_filter_no_match(self, tmp_path, stock_file, tables):
        generator = StockScoreGenerator(data_dir=tmp_path, output_dir=tmp_path, tables=tables)
        with pytest.raises(ValueError):
            generator.generate(stock_file.name, tickers=['ZZZ'], save=False)

    def test_missing_input_file(self, tmp_path, tables):
        generator = StockScoreGenerator(data_dir=tmp_path, output_dir=tmp_path, tables=tables)
        with pytest.raises(FileNotFoundError):
            generator.generate('missing.json')


def test_bundled_sample_data_loads(tables):
    stocks = load_stock_profiles(DATA_DIR / SAMPLE_STOCKS_FILE)
    holdings = load_holdings(DATA_DIR / SAMPLE_PORTFOLIO_FILE, stocks)
    assert 'SYK' in {s.ticker for s in stocks}
    assert all(h.value > 0 for h in holdings)
