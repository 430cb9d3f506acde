from databases import Database

from podiumboard.config import config

database = Database(config.database_url)
