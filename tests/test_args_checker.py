"""
Tests for check_get_features_args.

Covers the order of the structural checks, selector resolution,
centering / scaling, stats resolution and fit_q option handling.
"""

import logging

import numpy as np
import pandas as pd
import pytest
from hypothesis import assume, given, settings
from hypothesis import strategies as st

from profile_features import (
    ArgumentValidationError,
    DelegatedFitOptionError,
    FitQOptions,
    InvalidFitOptionsError,
    InvalidFlagError,
    InvalidStatsSpecError,
    MissingSelectorError,
    NonNumericColumnError,
    OverlappingSelectorError,
    SelectorNameError,
    SelectorRangeError,
    SelectorTypeError,
    StructuralError,
    UnrecognizedFitOptionError,
    ValidGetFeaturesArgs,
    center_scale,
    check_get_features_args,
    ensure_valid_args,
    summary_stats,
)
from profile_features.config import CONFIG


def zscore(values) -> np.ndarray:
    values = np.asarray(values, dtype=float)
    return (values - values.mean()) / values.std(ddof=1)


class TestScenarios:
    """End-to-end behaviour on a small three column table."""

    def test_indices_and_names_with_scaling(self, frame):
        args = check_get_features_args(frame, cont=[1, 3], disc=['b'], center_scale=True)

        assert isinstance(args, ValidGetFeaturesArgs)
        assert args.cont == ('a', 'c')
        assert args.disc == ('b',)
        assert list(args.data.columns) == ['a', 'b', 'c']
        pd.testing.assert_series_equal(args.data['b'], frame['b'])
        np.testing.assert_allclose(args.data['a'], zscore(frame['a']))
        np.testing.assert_allclose(args.data['c'], zscore(frame['c']))

    def test_index_out_of_range(self, frame):
        with pytest.raises(SelectorRangeError) as excinfo:
            check_get_features_args(frame, cont=[1, 99])
        assert excinfo.value.values == [99]
        assert '99' in str(excinfo.value)

    def test_unknown_name(self, frame):
        with pytest.raises(SelectorNameError) as excinfo:
            check_get_features_args(frame, cont=['a', 'z'])
        assert excinfo.value.values == ['z']

    def test_text_column_as_continuous(self, frame):
        with pytest.raises(NonNumericColumnError) as excinfo:
            check_get_features_args(frame, cont=['b'])
        assert excinfo.value.values == ['b']
        assert "'b'" in str(excinfo.value)

    def test_unrecognized_statistic(self, frame):
        with pytest.raises(InvalidStatsSpecError, match='bogus'):
            check_get_features_args(frame, cont=['a'], stats=['mean', 'bogus'])

    def test_unrecognized_fit_option(self, frame):
        with pytest.raises(UnrecognizedFitOptionError) as excinfo:
            check_get_features_args(
                frame, cont=['a'], fit_q_args={'window_size': 5, 'unknown_param': 1}
            )
        assert excinfo.value.values == ['unknown_param']
        assert 'unknown_param' in str(excinfo.value)
        assert excinfo.value.parameter == 'fit_q_args'

    def test_non_string_fit_option_key(self, frame):
        with pytest.raises(UnrecognizedFitOptionError) as excinfo:
            check_get_features_args(frame, cont=['a'], fit_q_args={1: 5})
        assert excinfo.value.parameter == 'fit_q_args'
        assert excinfo.value.values == [1]


class TestStructuralChecks:

    @pytest.mark.parametrize('data', [[[1, 2], [3, 4], [5, 6]], np.ones((5, 2)), None])
    def test_not_a_dataframe(self, data):
        with pytest.raises(StructuralError):
            check_get_features_args(data, cont=[1])

    @given(n_rows=st.integers(min_value=0, max_value=2))
    def test_too_few_rows(self, n_rows):
        data = pd.DataFrame({'a': np.arange(n_rows, dtype=float)})
        # too few rows wins over every other problem
        with pytest.raises(StructuralError):
            check_get_features_args(data, cont=None, disc=None, center_scale='no', stats=7)

    def test_min_rows_from_config(self, frame, monkeypatch):
        monkeypatch.setitem(CONFIG, 'MIN_ROWS', 6)
        with pytest.raises(StructuralError, match='more than 5 rows'):
            check_get_features_args(frame, cont=['a'])

    def test_duplicate_column_names(self):
        data = pd.DataFrame([[1, 2], [3, 4], [5, 6]], columns=['a', 'a'])
        with pytest.raises(StructuralError, match='unique'):
            check_get_features_args(data, cont=[1])

    @pytest.mark.parametrize('empty', [None, [], ()])
    def test_no_selector(self, frame, empty):
        with pytest.raises(MissingSelectorError):
            check_get_features_args(frame, cont=empty, disc=None)

    def test_missing_selector_checked_before_stats(self, frame):
        with pytest.raises(MissingSelectorError):
            check_get_features_args(frame, stats=7)

    @pytest.mark.parametrize('stats', [7, {'mean': 1}, [1, 2], None])
    def test_stats_of_wrong_type(self, frame, stats):
        with pytest.raises(InvalidStatsSpecError):
            check_get_features_args(frame, cont=['a'], stats=stats)

    def test_stats_checked_before_flag(self, frame):
        with pytest.raises(InvalidStatsSpecError):
            check_get_features_args(frame, cont=['a'], stats=7, center_scale='no')

    @pytest.mark.parametrize('flag', ['yes', 1, None, [True], np.array([True, False])])
    def test_flag_not_boolean(self, frame, flag):
        with pytest.raises(InvalidFlagError) as excinfo:
            check_get_features_args(frame, cont=['a'], center_scale=flag)
        assert excinfo.value.parameter == 'center_scale'

    def test_numpy_bool_flag(self, frame):
        args = check_get_features_args(frame, cont=['a'], center_scale=np.bool_(False))
        pd.testing.assert_frame_equal(args.data, frame)

    def test_errors_share_a_base_class(self, frame):
        with pytest.raises(ArgumentValidationError):
            check_get_features_args(frame, cont=['a'], center_scale='no')
        with pytest.raises(ValueError):
            check_get_features_args(frame, cont=[42])


class TestSelectors:

    def test_discrete_only(self, frame):
        args = check_get_features_args(frame, disc=[2])
        assert args.cont is None
        assert args.disc == ('b',)
        pd.testing.assert_frame_equal(args.data, frame)

    def test_discrete_may_be_text_or_numeric(self, frame):
        args = check_get_features_args(frame, disc=['b', 'c'])
        assert args.disc == ('b', 'c')

    def test_bad_discrete_selector(self, frame):
        with pytest.raises(SelectorRangeError) as excinfo:
            check_get_features_args(frame, cont=['a'], disc=[4])
        assert "'disc'" in str(excinfo.value)

    def test_mixed_selector(self, frame):
        with pytest.raises(SelectorTypeError):
            check_get_features_args(frame, cont=['a', 3])

    def test_whole_float_column_numbers(self, frame):
        args = check_get_features_args(frame, cont=[1.0, 3.0], disc=[2.0])
        assert args.cont == ('a', 'c')
        assert args.disc == ('b',)

    def test_fractional_column_number(self, frame):
        with pytest.raises(SelectorRangeError) as excinfo:
            check_get_features_args(frame, cont=[1.5])
        assert excinfo.value.values == [1.5]
        assert '1.5' in str(excinfo.value)

    def test_overlapping_roles(self, frame):
        with pytest.raises(OverlappingSelectorError) as excinfo:
            check_get_features_args(frame, cont=['a', 'c'], disc=[3])
        assert excinfo.value.values == ['c']

    def test_boolean_column_is_not_numeric(self, frame):
        data = frame.assign(flag=[True, False, True, True, False])
        with pytest.raises(NonNumericColumnError, match='flag'):
            check_get_features_args(data, cont=['a', 'flag'])

    def test_variables(self, frame):
        args = check_get_features_args(frame, cont=['c'], disc=['b'])
        assert args.variables == ('c', 'b')


class TestCenterScale:

    def test_caller_frame_not_modified(self, frame):
        original = frame.copy()
        args = check_get_features_args(frame, cont=['a', 'c'])
        pd.testing.assert_frame_equal(frame, original)
        assert args.data is not frame

    def test_no_scaling(self, frame):
        args = check_get_features_args(frame, cont=['a', 'c'], center_scale=False)
        pd.testing.assert_frame_equal(args.data, frame)

    def test_column_order_kept(self, wide_frame):
        args = check_get_features_args(wide_frame, cont=['pressure', 'temp'], disc=['state'])
        assert list(args.data.columns) == list(wide_frame.columns)
        pd.testing.assert_series_equal(args.data['time'], wide_frame['time'])
        pd.testing.assert_series_equal(args.data['alarm'], wide_frame['alarm'])

    def test_repeated_column_scaled_once(self, frame):
        args = check_get_features_args(frame, cont=[1, 1])
        assert args.cont == ('a', 'a')
        np.testing.assert_allclose(args.data['a'], zscore(frame['a']))

    def test_missing_values_ignored(self):
        data = pd.DataFrame({'a': [1.0, np.nan, 3.0, 5.0]})
        scaled = center_scale(data, ['a'])
        assert np.isnan(scaled['a'][1])
        np.testing.assert_allclose(scaled['a'].dropna(), zscore([1.0, 3.0, 5.0]))

    def test_nullable_integers(self):
        data = pd.DataFrame({'a': pd.array([1, None, 3, 5], dtype='Int64')})
        args = check_get_features_args(data, cont=['a'])
        np.testing.assert_allclose(args.data['a'].dropna(), zscore([1.0, 3.0, 5.0]))

    def test_constant_column(self, frame, caplog):
        data = frame.assign(const=[2.0] * 5)
        with caplog.at_level(logging.WARNING, logger='profile_features'):
            args = check_get_features_args(data, cont=['a', 'const'])
        assert args.data['const'].isna().all()
        assert 'const' in caplog.text

    def test_single_observed_value(self, caplog):
        data = pd.DataFrame({'a': [1.0, 2.0, 4.0], 'sparse': [np.nan, 3.0, np.nan]})
        with caplog.at_level(logging.WARNING, logger='profile_features'):
            scaled = center_scale(data, ['a', 'sparse'])
        assert scaled['sparse'].isna().all()
        assert "'sparse'" in caplog.text
        assert "'a'" not in caplog.text
        np.testing.assert_allclose(scaled['a'], zscore([1.0, 2.0, 4.0]))

    @settings(deadline=None)
    @given(
        values=st.lists(
            st.floats(min_value=-1e3, max_value=1e3, allow_nan=False),
            min_size=3,
            max_size=40,
        )
    )
    def test_scaled_moments(self, values):
        assume(np.std(values) > 1e-1)
        data = pd.DataFrame({'x': values, 'label': ['s'] * len(values)})
        args = check_get_features_args(data, cont=['x'], disc=['label'])
        scaled = args.data['x'].to_numpy()
        assert abs(scaled.mean()) < 1e-6
        assert scaled.std(ddof=1) == pytest.approx(1.0, rel=1e-6)


class TestStatsAndFitOptions:

    def test_default_stats(self, frame):
        args = check_get_features_args(frame, cont=['a'])
        assert args.stats == summary_stats()

    def test_resolved_stats_pass_through(self, frame):
        stats = summary_stats(['mean', 'max'])
        args = check_get_features_args(frame, cont=['a'], stats=stats)
        assert args.stats is stats

    def test_stats_callable(self, frame):
        args = check_get_features_args(frame, cont=['a'], stats='max', center_scale=False)
        assert args.stats(args.data['a'])['max'] == 5.0

    def test_no_fit_options(self, frame):
        assert check_get_features_args(frame, cont=['a']).fit_q_args is None

    def test_fit_options_replaced_by_checked_options(self, frame):
        args = check_get_features_args(frame, cont=['a'], fit_q_args={'window_size': 5})
        assert args.fit_q_args == FitQOptions(window_size=5)

    def test_checked_fit_options_pass_through(self, frame):
        options = FitQOptions(window_size=9)
        args = check_get_features_args(frame, cont=['a'], fit_q_args=options)
        assert args.fit_q_args is options

    def test_positional_fit_options(self, frame):
        with pytest.raises(InvalidFitOptionsError):
            check_get_features_args(frame, cont=['a'], fit_q_args=[5])

    def test_data_argument_is_not_a_fit_option(self, frame):
        with pytest.raises(UnrecognizedFitOptionError, match="'y'"):
            check_get_features_args(frame, cont=['a'], fit_q_args={'y': frame})

    def test_rejected_fit_option_value(self, frame):
        with pytest.raises(DelegatedFitOptionError, match='window_size'):
            check_get_features_args(frame, cont=['a'], fit_q_args={'window_size': 4})


class TestValidatedArgs:

    def test_repeat_calls_are_equal(self, wide_frame):
        kwargs = dict(cont=[2, 4], disc=['state'], stats=['mean', 'sd'], fit_q_args={'stride': 2})
        first = check_get_features_args(wide_frame, **kwargs)
        second = check_get_features_args(wide_frame, **kwargs)
        assert first == second
        assert first is not second
        pd.testing.assert_series_equal(
            first.stats(first.data['temp']), second.stats(second.data['temp'])
        )

    def test_different_calls_are_not_equal(self, frame):
        scaled = check_get_features_args(frame, cont=['a'])
        raw = check_get_features_args(frame, cont=['a'], center_scale=False)
        assert scaled != raw

    def test_to_dict(self, frame):
        args = check_get_features_args(frame, cont=['a'])
        assert set(args.to_dict()) == {'data', 'cont', 'disc', 'stats', 'fit_q_args'}

    def test_with_data_for_a_group(self, wide_frame):
        args = check_get_features_args(wide_frame, cont=['temp'], disc=['state'])
        group = args.data.iloc[:10]
        grouped = args.with_data(group)
        assert grouped.data is group
        assert grouped.stats is args.stats
        assert grouped.cont == args.cont

    def test_with_data_missing_columns(self, wide_frame):
        args = check_get_features_args(wide_frame, cont=['temp'], disc=['state'])
        with pytest.raises(SelectorNameError, match='state'):
            args.with_data(wide_frame[['temp']])

    def test_ensure_valid_args_passes_through(self, frame):
        args = check_get_features_args(frame, cont=['a'])
        assert ensure_valid_args(args) is args

    def test_ensure_valid_args_checks(self, frame):
        args = ensure_valid_args(data=frame, cont=['a'])
        assert isinstance(args, ValidGetFeaturesArgs)

    def test_ensure_valid_args_rejects_both(self, frame):
        args = check_get_features_args(frame, cont=['a'])
        with pytest.raises(TypeError, match='not both'):
            ensure_valid_args(args, cont=['c'])

    def test_ensure_valid_args_rejects_plain_dict(self, frame):
        with pytest.raises(TypeError):
            ensure_valid_args({'data': frame, 'cont': ['a']})

    def test_failure_logged(self, frame, caplog):
        with caplog.at_level(logging.DEBUG, logger='profile_features'):
            with pytest.raises(SelectorRangeError):
                check_get_features_args(frame, cont=[7])
        assert 'SelectorRangeError' in caplog.text
