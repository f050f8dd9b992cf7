"""Feature extraction and objective forecasting."""
