# UPS API services: token exchange, authentication, envelopes, client
