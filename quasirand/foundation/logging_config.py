"""Logging configuration for the quasirand package."""
import logging
import sys
from pathlib import Path
from typing import Optional


def setup_logging(
    level: str = "WARNING",
    log_file: Optional[str] = None,
    log_dir: Optional[str] = None,
    format_string: Optional[str] = None
) -> logging.Logger:
    """
    Set up logging for the generator package.
    
    Args:
        level: Logging level ('DEBUG', 'INFO', 'WARNING', 'ERROR', 'CRITICAL')
        log_file: Optional log file name
        log_dir: Optional log directory (defaults to 'outputs/logs')
        format_string: Optional custom format string
        
    Returns:
        Configured logger
    """
    logger = logging.getLogger('quasirand')
    logger.setLevel(getattr(logging, level.upper()))
    
    # Remove existing handlers
    logger.handlers.clear()
    
    if format_string is None:
        format_string = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'
    
    formatter = logging.Formatter(format_string)
    
    console_handler = logging.StreamHandler(sys.stdout)
    console_handler.setLevel(getattr(logging, level.upper()))
    console_handler.setFormatter(formatter)
    logger.addHandler(console_handler)
    
    if log_file:
        if log_dir is None:
            log_dir = 'outputs/logs'
        
        log_path = Path(log_dir)
        log_path.mkdir(parents=True, exist_ok=True)
        
        file_handler = logging.FileHandler(log_path / log_file)
        file_handler.setLevel(getattr(logging, level.upper()))
        file_handler.setFormatter(formatter)
        logger.addHandler(file_handler)
    
    return logger


def get_logger(name: str) -> logging.Logger:
    """
    Get a logger below the package namespace.
    
    Args:
        name: Logger name, usually the module's __name__
        
    Returns:
        Logger instance
    """
    if name == 'quasirand' or name.startswith('quasirand.'):
        return logging.getLogger(name)
    return logging.getLogger(f'quasirand.{name}')


# Default logger for the package
default_logger = setup_logging()
