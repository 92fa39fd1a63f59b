import config

# Tests run against the documented defaults, not whatever the shell or a .env sets
config._settings = config.Settings()
