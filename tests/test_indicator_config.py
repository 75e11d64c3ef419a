"""
Tests for string-driven indicator configuration.

Validates the uniform error policy:
1. Unknown field names raise UnknownParameterError
2. Unparsable values raise ParameterParseError
3. init() on a configuration that fails validation raises InvalidConfig
All three are IndicatorConfigError (and ValueError).
"""

import pytest

from tastream.core import (
    Candle,
    IndicatorConfigError,
    IndicatorResult,
    InvalidConfig,
    ParameterParseError,
    Source,
    UnknownParameterError,
    Action,
)
from tastream.indicators import (
    ChaikinMoneyFlow,
    ChandeKrollStop,
    ChandeMomentumOscillator,
    KeltnerChannels,
    TVFisherTransform,
)
from tastream.core.indicator import _parser_for
from tastream.methods import RegularMethods


class TestDefaults:

    def test_keltner_defaults(self):
        cfg = KeltnerChannels()
        assert (cfg.period, cfg.method, cfg.sigma, cfg.source) == (20, RegularMethods.EMA, 1.0, Source.CLOSE)
        assert cfg.output_size == (3, 1)

    def test_parameter_names_follow_field_order(self):
        assert KeltnerChannels.parameter_names() == ["period", "method", "sigma", "source"]
        assert ChandeKrollStop.parameter_names() == ["p", "method", "x", "q", "source"]

    def test_size_parameter_does_not_hide_output_size(self):
        cfg = ChaikinMoneyFlow()
        assert cfg.size == 20
        assert cfg.output_size == (1, 1)
        cfg.set("size", "30")
        assert (cfg.size, cfg.output_size) == (30, (1, 1))

    @pytest.mark.parametrize("cls", [
        ChaikinMoneyFlow,
        ChandeKrollStop,
        KeltnerChannels,
        ChandeMomentumOscillator,
        TVFisherTransform,
    ])
    def test_output_size_matches_result_shape(self, cls):
        cfg = cls()
        result = cfg.init(Candle.from_price(100.0, volume=10.0)).update(Candle.from_price(101.0, volume=10.0))
        assert cfg.output_size == cls.SIZE == result.size

    def test_volume_based_flag(self):
        assert ChaikinMoneyFlow().is_volume_based
        assert not KeltnerChannels().is_volume_based

    @pytest.mark.parametrize("cfg", [
        ChaikinMoneyFlow(),
        ChandeKrollStop(),
        KeltnerChannels(),
        ChandeMomentumOscillator(),
        TVFisherTransform(),
    ])
    def test_defaults_validate(self, cfg):
        assert cfg.validate()


class TestSet:

    def test_parses_by_field_type(self):
        cfg = KeltnerChannels()
        cfg.set("period", "14")
        cfg.set("sigma", "2.5")
        cfg.set("method", "SMA")
        cfg.set("source", "hl2")
        assert cfg.period == 14
        assert cfg.sigma == 2.5
        assert cfg.method is RegularMethods.SMA
        assert cfg.source is Source.HL2

    def test_method_aliases(self):
        cfg = ChandeKrollStop()
        cfg.set("method", "smma")
        assert cfg.method is RegularMethods.RMA

    def test_set_many(self):
        cfg = ChandeKrollStop()
        cfg.set_many({"p": "5", "x": "1.5", "q": "3"})
        assert (cfg.p, cfg.x, cfg.q) == (5, 1.5, 3)

    def test_unknown_parameter(self):
        cfg = KeltnerChannels()
        with pytest.raises(UnknownParameterError, match="Unknown parameter 'length' for 'KeltnerChannels'"):
            cfg.set("length", "10")

    def test_class_constants_are_not_parameters(self):
        with pytest.raises(UnknownParameterError):
            KeltnerChannels().set("NAME", "x")

    @pytest.mark.parametrize("name,value", [
        ("period", "abc"),
        ("period", "14.5"),
        ("sigma", "wide"),
        ("method", "hull"),
        ("source", "median"),
    ])
    def test_unparsable_value(self, name, value):
        cfg = KeltnerChannels()
        with pytest.raises(ParameterParseError, match=f"Cannot parse '{value}'"):
            cfg.set(name, value)

    def test_failed_set_leaves_value_unchanged(self):
        cfg = KeltnerChannels()
        with pytest.raises(ParameterParseError):
            cfg.set("period", "abc")
        assert cfg.period == 20

    def test_no_boolean_parser(self):
        with pytest.raises(TypeError, match="No string parser"):
            _parser_for(bool)

    def test_errors_share_a_base(self):
        cfg = ChaikinMoneyFlow()
        with pytest.raises(IndicatorConfigError):
            cfg.set("bogus", "1")
        with pytest.raises(ValueError):
            cfg.set("size", "x")


class TestValidation:
    candle = Candle.from_price(100.0, volume=10.0)

    @pytest.mark.parametrize("cfg", [
        ChaikinMoneyFlow(size=1),
        ChandeKrollStop(x=-0.1),
        ChandeKrollStop(p=0),
        ChandeKrollStop(q=0),
        KeltnerChannels(period=1),
        KeltnerChannels(sigma=0.0),
        ChandeMomentumOscillator(period=0),
        ChandeMomentumOscillator(zone=1.5),
        ChandeMomentumOscillator(zone=-0.1),
        TVFisherTransform(period1=2),
        TVFisherTransform(period2=0),
        TVFisherTransform(zone=-1.0),
    ])
    def test_invalid_config_raises_on_init(self, cfg):
        assert not cfg.validate()
        with pytest.raises(InvalidConfig, match=f"Invalid configuration for '{cfg.NAME}'"):
            cfg.init(self.candle)

    def test_boundary_values_are_valid(self):
        assert ChaikinMoneyFlow(size=2).validate()
        assert ChandeKrollStop(x=0.0, p=1, q=1).validate()
        assert ChandeMomentumOscillator(period=1, zone=0.0).validate()
        assert ChandeMomentumOscillator(zone=1.0).validate()
        assert TVFisherTransform(period1=3, period2=1, zone=0.0).validate()


class TestIndicatorResult:

    def test_accessors(self):
        result = IndicatorResult.new([1.0, 2.0], [Action.BUY_ALL])
        assert result.values == (1.0, 2.0)
        assert result.value(1) == 2.0
        assert result.signal(0) is Action.BUY_ALL
        assert result.size == (2, 1)
