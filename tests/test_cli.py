import pytest
import torch

from nnoptions import ConfigurationError, MaxPool2dOptions, functional as F
from nnoptions.utils.cli import main, parse_assignments, parse_value, resolve_record


def test_resolve_record_with_and_without_suffix():
    assert resolve_record('MaxPool2d') is MaxPool2dOptions
    assert resolve_record('MaxPool2dOptions') is MaxPool2dOptions
    assert resolve_record('SoftmaxFunc') is F.SoftmaxFuncOptions
    with pytest.raises(ConfigurationError):
        resolve_record('MaxPool')
    with pytest.raises(ConfigurationError):
        resolve_record('Conv2d')


def test_parse_value():
    assert parse_value('3') == 3
    assert parse_value('[2, 1]') == [2, 1]
    assert parse_value('True') is True
    assert parse_value('torch.float64') is torch.float64
    assert parse_value('relu') == 'relu'


def test_parse_assignments():
    assert parse_assignments(['kernel_size=3', 'stride = [2,1]']) == {
        'kernel_size': 3, 'stride': [2, 1]}
    with pytest.raises(ConfigurationError):
        parse_assignments(['kernel_size'])
    with pytest.raises(ConfigurationError):
        parse_assignments(['=3'])


def test_main_prints_defaults(capsys):
    assert main(['LeakyReLU']) == 0
    out = capsys.readouterr().out
    assert 'LeakyReLUOptions' in out
    assert 'negative_slope = 0.01' in out
    assert 'inplace = False' in out


def test_main_builds_module(capsys):
    assert main(['MaxPool2d', 'kernel_size=3', 'stride=[2,1]', '--build']) == 0
    out = capsys.readouterr().out
    assert 'kernel_size = (3, 3)' in out
    assert 'stride = (2, 1)' in out
    assert 'MaxPool2d(' in out


def test_main_resolves_dtype(capsys):
    assert main(['SoftmaxFunc', 'dim=1', 'dtype=torch.float64']) == 0
    assert 'dtype = torch.float64' in capsys.readouterr().out


@pytest.mark.parametrize('argv', [
    ['Conv2d'],
    ['MaxPool2d', 'kernel_size=[1,2,3]'],
    ['MaxPool2d', 'kernel_size=3', 'bogus=1'],
    ['Softmax'],
    ['GumbelSoftmaxFunc', '--build'],
    ['MaxPool2d', 'kernel_size=2.5'],
    ['FractionalMaxPool2d', 'kernel_size=2', '--build'],
    ['MultiheadAttention', 'embed_dim=7', 'num_heads=2', '--build'],
])
def test_main_reports_errors(argv, capsys):
    assert main(argv) == 1
    assert '[X]' in capsys.readouterr().err
