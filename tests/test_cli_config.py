"""Tests for CLI configuration module."""

import json

from cli.config import Config


def test_config_creates_default_file(tmp_path):
    """Test that config file is created with defaults if missing."""
    config_path = tmp_path / '.chunkterm' / 'config.json'
    config = Config(config_path)

    assert config_path.exists()

    assert config.data['peer_host'] == Config.DEFAULT_CONFIG['peer_host']
    assert config.data['peer_port'] == Config.DEFAULT_CONFIG['peer_port']
    assert config.data['timeout'] == 10
    assert config.data['max_retries'] == 3
    assert config.data['retry_backoff_multiplier'] == 2
    assert config.data['byte_order'] == 'big'


def test_config_loads_existing_file(tmp_path):
    """Test loading existing config file."""
    config_path = tmp_path / '.chunkterm' / 'config.json'
    config_path.parent.mkdir(parents=True)

    existing_data = {
        'peer_host': 'peer-3.cluster',
        'peer_port': 22223,
        'byte_order': 'little',
    }
    with open(config_path, 'w') as f:
        json.dump(existing_data, f)

    config = Config(config_path)

    assert config.get_peer_target() == 'peer-3.cluster:22223'
    assert config.get_byte_order() == 'little'

    assert config.data['timeout'] == 10
    assert config.data['max_retries'] == 3


def test_config_corrupt_file_falls_back_to_defaults(tmp_path):
    """Test that an unreadable config is backed up and defaults are used."""
    config_path = tmp_path / '.chunkterm' / 'config.json'
    config_path.parent.mkdir(parents=True)
    config_path.write_text('{not json')

    config = Config(config_path)

    assert config.data == Config.DEFAULT_CONFIG
    assert config_path.with_suffix('.json.bak').exists()


def test_config_set_peer_persists(temp_config):
    """Test that changing the peer is written to disk."""
    temp_config.set_peer('10.0.0.7', 22224)

    with open(temp_config.config_path, 'r') as f:
        data = json.load(f)
    assert data['peer_host'] == '10.0.0.7'
    assert data['peer_port'] == 22224
    assert temp_config.get_peer_target() == '10.0.0.7:22224'


def test_config_retry_settings(temp_config):
    """Test retry configuration retrieval."""
    retry_config = temp_config.get_retry_config()

    assert retry_config == {'max_retries': 3, 'retry_backoff_multiplier': 2}


def test_config_unknown_byte_order_falls_back(temp_config):
    temp_config.data['byte_order'] = 'middle'

    assert temp_config.get_byte_order() == 'big'
