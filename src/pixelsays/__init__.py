from loguru import logger

# Library code stays quiet unless the application opts in
logger.disable("pixelsays")
