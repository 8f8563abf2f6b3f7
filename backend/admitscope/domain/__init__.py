# Domain layer: record contracts and the scoring engine
