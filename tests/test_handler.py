"""Tests for query-string validation."""

import pytest
from starlette.datastructures import QueryParams

from passgen.errors import (
    EmptyAlphabetError,
    InvalidBooleanError,
    InvalidLengthError,
    MissingParameterError,
)
from passgen.handler import (
    MAX_LENGTH,
    REQUIRED_PARAMS,
    get_query_param,
    parse_flag,
    parse_length,
    parse_password_config,
)
from passgen.password_generator import PasswordConfig


class TestPresence:

    @pytest.mark.parametrize('name', REQUIRED_PARAMS)
    def test_missing(self, valid_query, name):
        del valid_query[name]
        with pytest.raises(MissingParameterError) as exc_info:
            parse_password_config(valid_query)
        assert exc_info.value.param == name

    @pytest.mark.parametrize('name', REQUIRED_PARAMS)
    def test_empty_counts_as_missing(self, valid_query, name):
        valid_query[name] = ''
        with pytest.raises(MissingParameterError) as exc_info:
            parse_password_config(valid_query)
        assert exc_info.value.param == name

    def test_first_missing_in_order_wins(self):
        with pytest.raises(MissingParameterError) as exc_info:
            parse_password_config({'useNumbers': 'true'})
        assert exc_info.value.param == 'length'

    def test_presence_checked_before_values(self, valid_query):
        valid_query['length'] = 'abc'
        del valid_query['useSpecialChar']
        with pytest.raises(MissingParameterError):
            parse_password_config(valid_query)

    def test_repeated_parameter_uses_first_value(self):
        query = QueryParams('length=5&length=abc')
        assert get_query_param(query, 'length') == '5'

    def test_list_values_in_plain_dict(self):
        assert get_query_param({'length': ['7', '9']}, 'length') == '7'
        with pytest.raises(MissingParameterError):
            get_query_param({'length': []}, 'length')


class TestLength:

    @pytest.mark.parametrize('value, expected', [('1', 1), ('10', 10), ('+5', 5), ('007', 7)])
    def test_valid(self, value, expected):
        assert parse_length(value) == expected

    @pytest.mark.parametrize(
        'value',
        ['0', '-5', 'abc', '1.5', ' 5', '5 ', '1_0', '0x10', '١٢', '0' * 5000, '9' * 5000],
        ids=lambda v: v if len(v) < 10 else f'{v[0]}x{len(v)}',
    )
    def test_invalid(self, value):
        with pytest.raises(InvalidLengthError):
            parse_length(value)

    def test_64_bit_bound(self):
        assert parse_length(str(MAX_LENGTH)) == MAX_LENGTH
        with pytest.raises(InvalidLengthError):
            parse_length(str(MAX_LENGTH + 1))

    def test_length_checked_before_flags(self, valid_query):
        valid_query['length'] = '0'
        valid_query['useUppercase'] = 'notabool'
        with pytest.raises(InvalidLengthError):
            parse_password_config(valid_query)


class TestFlags:

    @pytest.mark.parametrize('value', ['true', 'TRUE', 'True', 'tRuE', '1', 't', 'T'])
    def test_true_literals(self, value):
        assert parse_flag('useNumbers', value) is True

    @pytest.mark.parametrize('value', ['false', 'FALSE', 'False', '0', 'f', 'F'])
    def test_false_literals(self, value):
        assert parse_flag('useNumbers', value) is False

    @pytest.mark.parametrize('value', ['yes', 'no', 'notabool', '2', 'truee', ' true'])
    def test_rejected(self, value):
        with pytest.raises(InvalidBooleanError) as exc_info:
            parse_flag('useNumbers', value)
        assert exc_info.value.param == 'useNumbers'

    def test_first_bad_flag_wins(self, valid_query):
        valid_query['useLowercase'] = 'nope'
        valid_query['useSpecialChar'] = 'nope'
        with pytest.raises(InvalidBooleanError) as exc_info:
            parse_password_config(valid_query)
        assert exc_info.value.param == 'useLowercase'


class TestConfig:

    def test_builds_config(self):
        config = parse_password_config({
            'length': '10',
            'useUppercase': 'true',
            'useLowercase': 'false',
            'useNumbers': '1',
            'useSpecialChar': 'F',
        })
        assert config == PasswordConfig(
            length=10,
            use_uppercase=True,
            use_lowercase=False,
            use_numbers=True,
            use_special_char=False,
        )

    def test_all_flags_false(self, valid_query):
        for name in REQUIRED_PARAMS[1:]:
            valid_query[name] = 'false'
        with pytest.raises(EmptyAlphabetError):
            parse_password_config(valid_query)

    def test_accepts_starlette_query_params(self):
        query = QueryParams(
            'length=3&useUppercase=false&useLowercase=true'
            '&useNumbers=false&useSpecialChar=false'
        )
        config = parse_password_config(query)
        assert config.length == 3
        assert config.alphabet().isalpha()
