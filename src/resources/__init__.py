"""Twilio REST resources: records, options and request builders."""
