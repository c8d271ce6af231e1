"""Weather providers, IP location lookup and weather formatting."""