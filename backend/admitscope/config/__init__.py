# Configuration
