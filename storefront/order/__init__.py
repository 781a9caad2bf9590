"""Order models, configuration and adapters for the upstream services."""