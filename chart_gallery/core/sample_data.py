#!/usr/bin/env python3
"""
Sample Data Loader - Provides the datasets plotted by each chart example.

Built-in datasets are generated deterministically from the configured seed.
A variant can instead be backed by a CSV file listed under ``datasets`` in the
gallery config, e.g.::

    datasets:
      singleLine:
        filename: sales.csv
        loading_params: {encoding: utf-8, parse_dates: [day]}
"""

from pathlib import Path
from typing import Callable, Dict, Any, List, Optional

import numpy as np
import pandas as pd

from .base_component import BaseGalleryComponent
from .constants import CONFIG_KEY_DATASETS, CONFIG_KEY_SAMPLE_DATA, DEFAULT_SEED, ChartVariant

START_DATE = "2022-05-01"
MONTHS = ["Jan", "Feb", "Mar", "Apr", "May", "Jun", "Jul", "Aug", "Sep", "Oct", "Nov", "Dec"]
CITIES = ["Berlin", "Lisbon", "Oslo"]


def _daily_sales(rng: np.random.Generator, days: int = 30) -> pd.DataFrame:
    dates = pd.date_range(START_DATE, periods=days, freq="D")
    weekly = 40 + 15 * np.sin(np.arange(days) * 2 * np.pi / 7)
    sales = np.round(weekly + rng.normal(0, 8, days) + 60).astype(int)
    return pd.DataFrame({"day": dates, "sales": np.clip(sales, 5, None)})


def _heart_beat(rng: np.random.Generator) -> pd.DataFrame:
    # Sum-of-gaussians ECG: P, Q, R, S, T waves per beat
    sample_rate = 250
    duration = 4.0
    time = np.arange(0, duration, 1 / sample_rate)
    waves = [(0.12, 0.16, 0.025), (-0.12, 0.235, 0.008), (1.0, 0.26, 0.01),
             (-0.25, 0.285, 0.008), (0.3, 0.45, 0.04)]
    voltage = np.zeros_like(time)
    for beat_start in np.arange(0, duration, 0.8):
        for amplitude, offset, width in waves:
            voltage += amplitude * np.exp(-((time - beat_start - offset) ** 2) / (2 * width ** 2))
    voltage += rng.normal(0, 0.01, time.size)
    return pd.DataFrame({"time": np.round(time, 4), "voltage": voltage})


def _sine_wave(rng: np.random.Generator) -> pd.DataFrame:
    x = np.linspace(0, 2 * np.pi, 100)
    return pd.DataFrame({"x": x, "y": np.sin(x)})


def _temperatures(rng: np.random.Generator) -> pd.DataFrame:
    days = 90
    dates = pd.date_range(START_DATE, periods=days, freq="D")
    seasonal = 18 + 9 * np.sin(np.linspace(-0.5 * np.pi, 0.6 * np.pi, days))
    return pd.DataFrame({"day": dates, "temperature": np.round(seasonal + rng.normal(0, 1.5, days), 1)})


def _city_sales(rng: np.random.Generator) -> pd.DataFrame:
    frames = []
    for i, city in enumerate(CITIES):
        sales = _daily_sales(rng, days=30)
        sales["sales"] = sales["sales"] + i * 25
        sales.insert(1, "city", city)
        frames.append(sales)
    return pd.concat(frames, ignore_index=True)


def _line_points(rng: np.random.Generator) -> pd.DataFrame:
    return _daily_sales(rng, days=12)


def _two_bars(rng: np.random.Generator) -> pd.DataFrame:
    weekdays = ["Mon", "Tue", "Wed", "Thu", "Fri", "Sat", "Sun"]
    rows = []
    for product, base in (("Coffee", 80), ("Tea", 45)):
        for day in weekdays:
            rows.append({"weekday": day, "product": product, "sales": int(base + rng.integers(-20, 21))})
    return pd.DataFrame(rows)


def _pyramid(rng: np.random.Generator) -> pd.DataFrame:
    groups = ["0-9", "10-19", "20-29", "30-39", "40-49", "50-59", "60-69", "70-79", "80+"]
    base = np.array([5.4, 5.6, 6.2, 6.8, 6.5, 7.0, 5.9, 4.1, 2.5])
    rows = []
    for sex, shift in (("Female", 0.15), ("Male", -0.1)):
        values = np.round(base + shift * np.arange(len(groups)) / 4 + rng.normal(0, 0.2, len(groups)), 1)
        rows.extend({"age_group": g, "sex": sex, "population": float(v)} for g, v in zip(groups, values))
    return pd.DataFrame(rows)


def _storage(rng: np.random.Generator) -> pd.DataFrame:
    categories = ["Apps", "Photos", "Music", "Documents", "System"]
    sizes = np.round(rng.uniform(4, 40, len(categories)), 1)
    return pd.DataFrame({"category": categories, "size_gb": sizes})


def _time_sheet(rng: np.random.Generator) -> pd.DataFrame:
    activities = ["Email", "Meeting", "Development", "Lunch", "Development", "Review"]
    starts, ends = [], []
    clock = 8.5
    for activity in activities:
        length = 1.0 if activity == "Lunch" else float(rng.choice([0.5, 1.0, 1.5, 2.0]))
        starts.append(clock)
        ends.append(clock + length)
        clock += length
    return pd.DataFrame({"activity": activities, "start": starts, "end": ends})


def _sound_levels(rng: np.random.Generator) -> pd.DataFrame:
    samples = 40
    envelope = np.abs(np.sin(np.linspace(0, 3 * np.pi, samples)))
    amplitude = np.clip(envelope * rng.uniform(0.5, 1.0, samples), 0.05, 1.0)
    return pd.DataFrame({"sample": np.arange(samples), "amplitude": np.round(amplitude, 3)})


def _stacked_sales(rng: np.random.Generator) -> pd.DataFrame:
    frames = []
    for product, base in (("Coffee", 50), ("Tea", 30), ("Juice", 20)):
        sales = _daily_sales(rng, days=30)
        sales["sales"] = (sales["sales"] * base / 100).round().astype(int)
        sales.insert(1, "product", product)
        frames.append(sales)
    return pd.concat(frames, ignore_index=True)


def _monthly_range(rng: np.random.Generator) -> pd.DataFrame:
    mean = 10 + 10 * np.sin(np.linspace(-0.5 * np.pi, 1.5 * np.pi, 12))
    spread = rng.uniform(4, 9, 12)
    return pd.DataFrame({
        "month": MONTHS,
        "low": np.round(mean - spread, 1),
        "high": np.round(mean + spread, 1),
    })


def _heart_rate_range(rng: np.random.Generator) -> pd.DataFrame:
    days = 14
    dates = pd.date_range(START_DATE, periods=days, freq="D")
    low = rng.integers(48, 62, days)
    high = low + rng.integers(60, 110, days)
    return pd.DataFrame({"day": dates, "min_bpm": low, "max_bpm": high})


def _candles(rng: np.random.Generator) -> pd.DataFrame:
    days = 30
    dates = pd.bdate_range(START_DATE, periods=days)
    close = 150 + np.cumsum(rng.normal(0, 2.5, days))
    open_ = np.concatenate([[150.0], close[:-1]]) + rng.normal(0, 1, days)
    high = np.maximum(open_, close) + rng.uniform(0.2, 3, days)
    low = np.minimum(open_, close) - rng.uniform(0.2, 3, days)
    return pd.DataFrame({
        "day": dates,
        "open": np.round(open_, 2),
        "high": np.round(high, 2),
        "low": np.round(low, 2),
        "close": np.round(close, 2),
    })


def _heat_grid(rng: np.random.Generator) -> pd.DataFrame:
    size = 10
    rows, cols = np.meshgrid(np.arange(size), np.arange(size), indexing="ij")
    values = np.sin(rows / 2.0) + np.cos(cols / 3.0) + rng.normal(0, 0.2, rows.shape)
    return pd.DataFrame({"row": rows.ravel(), "column": cols.ravel(), "value": np.round(values.ravel(), 3)})


def _contributions(rng: np.random.Generator) -> pd.DataFrame:
    weeks = 26
    dates = pd.date_range("2022-01-02", periods=weeks * 7, freq="D")
    active = rng.random(dates.size) < 0.6
    counts = np.where(active, rng.poisson(4, dates.size), 0)
    frame = pd.DataFrame({"date": dates, "count": counts})
    frame["week"] = np.arange(dates.size) // 7
    # Sunday-first weekday rows
    frame["weekday"] = (dates.dayofweek.to_numpy() + 1) % 7
    return frame


def _scatter(rng: np.random.Generator) -> pd.DataFrame:
    rows = []
    for group, center in (("A", (2.0, 3.0)), ("B", (6.0, 5.0)), ("C", (4.0, 8.0))):
        points = rng.normal(center, 1.0, size=(25, 2))
        sizes = rng.uniform(10, 80, 25)
        rows.extend({"group": group, "x": float(x), "y": float(y), "size": float(s)}
                    for (x, y), s in zip(points, sizes))
    frame = pd.DataFrame(rows)
    frame[["x", "y", "size"]] = frame[["x", "y", "size"]].round(2)
    return frame


def _vector_field(rng: np.random.Generator) -> pd.DataFrame:
    grid = np.linspace(-2, 2, 9)
    x, y = np.meshgrid(grid, grid)
    u = -y
    v = x
    return pd.DataFrame({"x": x.ravel(), "y": y.ravel(), "u": u.ravel(), "v": v.ravel()})


GENERATORS: Dict[ChartVariant, Callable[[np.random.Generator], pd.DataFrame]] = {
    ChartVariant.SINGLE_LINE: _daily_sales,
    ChartVariant.SINGLE_LINE_LOLLIPOP: _daily_sales,
    ChartVariant.HEART_BEAT: _heart_beat,
    ChartVariant.ANIMATING_LINE: _sine_wave,
    ChartVariant.GRADIENT_LINE: _temperatures,
    ChartVariant.MULTI_LINE: _city_sales,
    ChartVariant.LINE_POINT: _line_points,
    ChartVariant.SINGLE_BAR: _daily_sales,
    ChartVariant.SINGLE_BAR_THRESHOLD: _daily_sales,
    ChartVariant.TWO_BARS: _two_bars,
    ChartVariant.PYRAMID: _pyramid,
    ChartVariant.ONE_DIMENSIONAL_BAR: _storage,
    ChartVariant.TIME_SHEET_BAR: _time_sheet,
    ChartVariant.SOUND_BAR: _sound_levels,
    ChartVariant.AREA_SIMPLE: _daily_sales,
    ChartVariant.STACKED_AREA: _stacked_sales,
    ChartVariant.RANGE_SIMPLE: _monthly_range,
    ChartVariant.RANGE_HEART_RATE: _heart_rate_range,
    ChartVariant.CANDLE_STICK: _candles,
    ChartVariant.CUSTOMIZEABLE_HEAT_MAP: _heat_grid,
    ChartVariant.GIT_CONTRIBUTIONS: _contributions,
    ChartVariant.SCATTER: _scatter,
    ChartVariant.VECTOR_FIELD: _vector_field,
}

# Columns each chart example reads; CSV overrides must provide them
REQUIRED_COLUMNS: Dict[ChartVariant, List[str]] = {
    ChartVariant.SINGLE_LINE: ["day", "sales"],
    ChartVariant.SINGLE_LINE_LOLLIPOP: ["day", "sales"],
    ChartVariant.HEART_BEAT: ["time", "voltage"],
    ChartVariant.ANIMATING_LINE: ["x", "y"],
    ChartVariant.GRADIENT_LINE: ["day", "temperature"],
    ChartVariant.MULTI_LINE: ["day", "city", "sales"],
    ChartVariant.LINE_POINT: ["day", "sales"],
    ChartVariant.SINGLE_BAR: ["day", "sales"],
    ChartVariant.SINGLE_BAR_THRESHOLD: ["day", "sales"],
    ChartVariant.TWO_BARS: ["weekday", "product", "sales"],
    ChartVariant.PYRAMID: ["age_group", "sex", "population"],
    ChartVariant.ONE_DIMENSIONAL_BAR: ["category", "size_gb"],
    ChartVariant.TIME_SHEET_BAR: ["activity", "start", "end"],
    ChartVariant.SOUND_BAR: ["sample", "amplitude"],
    ChartVariant.AREA_SIMPLE: ["day", "sales"],
    ChartVariant.STACKED_AREA: ["day", "product", "sales"],
    ChartVariant.RANGE_SIMPLE: ["month", "low", "high"],
    ChartVariant.RANGE_HEART_RATE: ["day", "min_bpm", "max_bpm"],
    ChartVariant.CANDLE_STICK: ["day", "open", "high", "low", "close"],
    ChartVariant.CUSTOMIZEABLE_HEAT_MAP: ["row", "column", "value"],
    ChartVariant.GIT_CONTRIBUTIONS: ["date", "count", "week", "weekday"],
    ChartVariant.SCATTER: ["group", "x", "y", "size"],
    ChartVariant.VECTOR_FIELD: ["x", "y", "u", "v"],
}


def generate_sample_data(variant: ChartVariant, seed: int = DEFAULT_SEED) -> pd.DataFrame:
    """Generate the built-in dataset for a variant; same seed, same frame."""
    variant = ChartVariant(variant)
    index = list(ChartVariant).index(variant)
    rng = np.random.default_rng([seed, index])
    return GENERATORS[variant](rng)


class SampleDataLoader(BaseGalleryComponent):
    """Handles dataset generation and loading for chart examples."""

    def __init__(
        self,
        config_file: Optional[str] = None,
        data_directory: Optional[str] = None,
        output_directory: Optional[str] = None,
        context=None,
        config_override=None,
    ):
        super().__init__(config_file, data_directory, output_directory, context=context, config_override=config_override)
        sample_config = self.config.get(CONFIG_KEY_SAMPLE_DATA) or {}
        seed = sample_config.get('seed')
        self.seed = DEFAULT_SEED if seed is None else int(seed)
        self.encoding_fallbacks = sample_config.get('encoding_fallbacks') or ['utf-8', 'latin-1', 'cp1252']
        self._cache: Dict[ChartVariant, pd.DataFrame] = {}

    def load(self, variant: ChartVariant) -> pd.DataFrame:
        """Return the dataset for a variant, from CSV override or built-in generator."""
        variant = ChartVariant(variant)
        if variant not in self._cache:
            df = self._load_override(variant)
            if df is None:
                df = generate_sample_data(variant, self.seed)
            self._cache[variant] = df
        return self._cache[variant].copy()

    def __call__(self, variant: ChartVariant) -> pd.DataFrame:
        return self.load(variant)

    def _load_override(self, variant: ChartVariant) -> Optional[pd.DataFrame]:
        """Load a configured CSV for the variant with encoding fallbacks."""
        dataset_config = (self.config.get(CONFIG_KEY_DATASETS) or {}).get(variant.value)
        if not dataset_config:
            return None

        filename = dataset_config.get('filename') or dataset_config.get('path')
        if filename is None:
            self.logger.error(f"Dataset for {variant} missing filename/path")
            return None

        file_path = Path(filename)
        if not file_path.is_absolute():
            file_path = self.data_dir / filename

        if not file_path.exists():
            self.logger.error(f"Dataset file not found: {file_path}")
            return None

        raw_loading_params = dict(dataset_config.get('loading_params') or {})
        explicit_encoding = raw_loading_params.pop('encoding', None)
        encodings = list(self.encoding_fallbacks)
        if explicit_encoding:
            encodings = [explicit_encoding] + [enc for enc in encodings if enc != explicit_encoding]

        df = None
        for encoding in encodings:
            try:
                df = pd.read_csv(file_path, encoding=encoding, **raw_loading_params)
                self.logger.info(f"Loaded {variant} dataset with {encoding} encoding: {len(df):,} records")
                break
            except UnicodeDecodeError:
                continue
            except Exception as e:
                self.logger.error(f"Error loading dataset for {variant}: {e}")
                return None

        if df is None:
            self.logger.error(f"Failed to decode dataset for {variant}: {file_path}")
            return None

        missing = [col for col in REQUIRED_COLUMNS[variant] if col not in df.columns]
        if missing:
            self.logger.error(f"Dataset for {variant} is missing columns {missing}; using built-in sample data")
            return None

        if df.empty:
            self.logger.error(f"Dataset for {variant} has no rows: {file_path}; using built-in sample data")
            return None

        return df

    def get_dataset_summary(self) -> Dict[str, Any]:
        """Get summary information about the datasets loaded so far."""
        return {
            variant.value: {
                'total_records': len(df),
                'columns': df.columns.tolist(),
            }
            for variant, df in self._cache.items()
        }
