"""Metric models, line encoding and sampling"""
from .models import (
    MetricKind,
    Names,
    NameList,
    Number,
    SendResult,
    SendStatus,
    SingleName,
    normalize_names,
)
from .encoder import (
    apply_sample_suffix,
    encode_counter,
    encode_line,
    encode_timer,
    format_rate,
    format_value,
)
from .sampler import Sampler, validate_rate

__all__ = [
    'MetricKind',
    'Names',
    'Number',
    'NameList',
    'SendResult',
    'SendStatus',
    'SingleName',
    'normalize_names',
    'apply_sample_suffix',
    'encode_counter',
    'encode_line',
    'encode_timer',
    'format_rate',
    'format_value',
    'Sampler',
    'validate_rate',
]
