"""Building blocks shared by the skills: errors, config, validation, SQL policy and formatting."""
