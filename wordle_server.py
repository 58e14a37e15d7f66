"""
Wordle Game Server - Main Entry Point

Initializes the game service and starts the Flask application.
"""

from wordle_game import create_app
from wordle_game.config import Config, validate_word_list_integrity, get_word_statistics
from wordle_game.services.game_service import initialize_game_service
from wordle_game.utils.game_logger import game_logger


def main():
    """Main function to initialize services and start the server."""
    try:
        print("Initializing services...")

        validate_word_list_integrity()
        stats = get_word_statistics()
        print(f"✓ Word list loaded ({stats['total_words']} words)")

        initialize_game_service(max_attempts=Config.MAX_ATTEMPTS)
        print("✓ Game service initialized successfully")

        print("Creating Flask application...")
        app = create_app(Config)
        print("✓ Flask application created successfully")

        game_logger.logger.info("Wordle Server Starting")

        print(f"\nStarting Wordle Game Server on {Config.HOST}:{Config.PORT}")
        print(f"Debug mode: {Config.DEBUG}")
        print("=" * 50)

        app.run(host=Config.HOST, port=Config.PORT, debug=Config.DEBUG)

    except KeyboardInterrupt:
        print("\nServer shutting down...")
        game_logger.logger.info("Wordle Server shutting down (KeyboardInterrupt)")
    except Exception as e:
        print(f"Error starting server: {e}")
        game_logger.logger.error(f"Error starting server: {e}")
        raise


if __name__ == '__main__':
    main()
