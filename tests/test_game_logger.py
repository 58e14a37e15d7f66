"""
Testing structured game logging.
"""

import json
import logging
from pathlib import Path
from types import SimpleNamespace

from wordle_game.utils.game_logger import GameLogger, game_logger

REQUEST = SimpleNamespace(remote_addr='10.0.0.1', method='POST', path='/api/new_game')


def file_handler_path(logger):
    handlers = [h for h in logger.handlers if isinstance(h, logging.FileHandler)]
    assert len(handlers) == 1
    return Path(handlers[0].baseFilename)


def test_stats_read_the_file_being_written(tmp_path):
    try:
        logger = GameLogger(log_dir=str(tmp_path), level='INFO')
        assert file_handler_path(logger.logger) == logger.log_file

        logger.log_user_action(REQUEST, 'new_game')
        logger.log_server_response(REQUEST, 'new_game', True, {'success': True, 'state': {'answer': None}})
        logger.log_server_response(REQUEST, 'submit_guess', False, {'success': False})
        logger.log_game_event('abc', 'game_won', '10.0.0.1', attempts_used=3)
        logger.log_error(REQUEST, ValueError('boom'), 'submit_guess', 'abc')

        stats = logger.get_log_stats()
        assert stats['log_file'] == str(logger.log_file)
        assert stats['total_entries'] == 5
        assert stats['user_actions'] == 1
        assert stats['server_responses'] == 2
        assert stats['game_events'] == 1
        assert stats['errors'] == 1
        assert stats['other'] == 0
    finally:
        game_logger.logger = game_logger._setup_logger()


def test_entries_are_json_and_hide_the_answer(tmp_path):
    try:
        logger = GameLogger(log_dir=str(tmp_path))
        state = {'current_attempt': 6, 'max_attempts': 6, 'game_over': True, 'won': False,
                 'guesses': ['SMILE'] * 6, 'answer': 'HAPPY'}
        logger.log_server_response(REQUEST, 'submit_guess', True, {'success': True, 'state': state})

        line = logger.log_file.read_text(encoding='utf-8').strip().splitlines()[-1]
        entry = json.loads(line.split(' | ', 2)[-1])
        assert entry['event_type'] == 'SERVER_RESPONSE_SUCCESS'
        assert entry['user_ip'] == '10.0.0.1'
        assert entry['details']['response']['state']['answer_revealed'] is True
        assert 'HAPPY' not in line
    finally:
        game_logger.logger = game_logger._setup_logger()


def test_missing_log_file_is_reported(tmp_path):
    try:
        logger = GameLogger(log_dir=str(tmp_path))
        for handler in list(logger.logger.handlers):
            handler.close()
        logger.log_file.unlink()
        assert 'error' in logger.get_log_stats()
    finally:
        game_logger.logger = game_logger._setup_logger()
