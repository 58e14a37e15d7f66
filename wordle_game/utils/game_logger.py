"""
Game Logger Module

Structured logging for user actions, server responses and game events.
Every entry is one JSON object written after a ``time | LEVEL |`` prefix.
"""

import logging
import json
from collections import Counter
from datetime import datetime
from typing import Dict, Any, Optional
from pathlib import Path

from ..config.app_config import Config

# Event types written by this module, mapped to the get_log_stats() keys
_STAT_KEYS = {
    'USER_ACTION': 'user_actions',
    'SERVER_RESPONSE_SUCCESS': 'server_responses',
    'SERVER_RESPONSE_ERROR': 'server_responses',
    'GAME_EVENT': 'game_events',
    'ERROR': 'errors',
}


class GameLogger:
    """
    Centralized logging for the Wordle HTTP layer.

    The engine logs through child loggers of ``wordle_game`` and so shares
    the handlers configured here.
    """

    def __init__(self, log_dir: str = Config.LOG_DIR, level: str = Config.LOG_LEVEL):
        self.log_dir = Path(log_dir)
        self.log_dir.mkdir(parents=True, exist_ok=True)
        resolved = logging.getLevelName(level.upper()) if isinstance(level, str) else level
        self.level = resolved if isinstance(resolved, int) else logging.INFO

        self.log_file: Path = self.log_dir / f"game_log_{datetime.now().strftime('%Y-%m-%d')}.log"
        self.logger = self._setup_logger()

    def _setup_logger(self) -> logging.Logger:
        """Attach a file handler for ``log_file`` and a WARNING console handler."""
        logger = logging.getLogger('wordle_game')
        logger.setLevel(self.level)

        for handler in list(logger.handlers):
            handler.close()
            logger.removeHandler(handler)

        file_handler = logging.FileHandler(self.log_file, encoding='utf-8')
        file_handler.setLevel(self.level)
        file_handler.setFormatter(logging.Formatter(
            '%(asctime)s | %(levelname)s | %(message)s',
            datefmt='%Y-%m-%d %H:%M:%S'
        ))

        console_handler = logging.StreamHandler()
        console_handler.setLevel(logging.WARNING)
        console_handler.setFormatter(logging.Formatter('%(levelname)s: %(message)s'))

        logger.addHandler(file_handler)
        logger.addHandler(console_handler)
        return logger

    def _emit(self, level: int, event_type: str, action: str,
              user_ip: Optional[str], details: Dict[str, Any]) -> None:
        entry = {
            'timestamp': datetime.now().isoformat(),
            'event_type': event_type,
            'action': action,
            'user_ip': user_ip or 'unknown',
            'details': details
        }
        self.logger.log(level, json.dumps(entry, ensure_ascii=False, default=str))

    @staticmethod
    def _client_ip(request) -> Optional[str]:
        return getattr(request, 'remote_addr', None)

    def log_user_action(self, request, action: str, game_id: Optional[str] = None, **kwargs):
        """
        Record an incoming request.

        Args:
            request: Flask request object
            action: Endpoint action, e.g. 'new_game' or 'submit_guess'
            game_id: Game identifier if applicable
            **kwargs: Request fields worth keeping, e.g. the submitted guess
        """
        self._emit(logging.INFO, 'USER_ACTION', action, self._client_ip(request), {
            'game_id': game_id,
            'route': f"{request.method} {request.path}",
            **kwargs
        })

    def log_server_response(self, request, action: str, success: bool,
                            response_data: Dict[str, Any], game_id: Optional[str] = None, **kwargs):
        """Record the response for ``action``; failures are logged at ERROR."""
        self._emit(
            logging.INFO if success else logging.ERROR,
            'SERVER_RESPONSE_SUCCESS' if success else 'SERVER_RESPONSE_ERROR',
            action, self._client_ip(request),
            {'game_id': game_id, 'response': self._summarize_response(response_data), **kwargs}
        )

    def log_game_event(self, game_id: Optional[str], event: str, user_ip: Optional[str], **kwargs):
        """Record a game outcome such as 'game_won', 'game_lost' or 'game_reset'."""
        self._emit(logging.INFO, 'GAME_EVENT', event, user_ip, {'game_id': game_id, **kwargs})

    def log_error(self, request, error: Exception, action: str, game_id: Optional[str] = None):
        self._emit(logging.ERROR, 'ERROR', action, self._client_ip(request), {
            'game_id': game_id,
            'error_type': type(error).__name__,
            'error_message': str(error)
        })

    def _summarize_response(self, data: Dict[str, Any]) -> Dict[str, Any]:
        """Reduce a response body to counters so logs never carry the hidden answer."""
        if not isinstance(data, dict):
            return {'data_type': type(data).__name__}

        summary = {key: value for key, value in data.items() if key not in ('state', 'log_stats')}
        state = data.get('state')
        if isinstance(state, dict):
            summary['state'] = {
                'current_attempt': state.get('current_attempt'),
                'max_attempts': state.get('max_attempts'),
                'game_over': state.get('game_over'),
                'won': state.get('won'),
                'guesses_count': len(state.get('guesses', [])),
                'answer_revealed': state.get('answer') is not None
            }
        return summary

    def get_log_stats(self) -> Dict[str, Any]:
        """Count the entries in the file the handler is writing, by event type."""
        if not self.log_file.exists():
            return {'error': f'Log file not found: {self.log_file}'}

        counts: Counter = Counter()
        try:
            with open(self.log_file, 'r', encoding='utf-8') as f:
                for line in f:
                    if not line.strip():
                        continue
                    payload = line.split(' | ', 2)[-1]
                    try:
                        event_type = json.loads(payload).get('event_type')
                    except (ValueError, AttributeError):
                        event_type = None
                    counts[_STAT_KEYS.get(event_type, 'other')] += 1
        except OSError as e:
            return {'error': f'Failed to get stats: {e}'}

        return {
            'log_file': str(self.log_file),
            'file_size_mb': round(self.log_file.stat().st_size / (1024 * 1024), 2),
            'total_entries': sum(counts.values()),
            **{key: counts[key] for key in ('user_actions', 'server_responses', 'game_events', 'errors', 'other')}
        }


# Global logger instance
game_logger = GameLogger()
