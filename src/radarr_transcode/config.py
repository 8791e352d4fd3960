"""Run configuration assembled from command-line options and the environment."""
from dataclasses import dataclass
from typing import Optional, Union

from radarr_transcode.errors import ConfigurationError
from radarr_transcode.utils import constants


@dataclass
class TriageConfig:
    radarr_api_key: Optional[str] = constants.RADARR_API_KEY
    radarr_url: Optional[str] = constants.RADARR_URL
    transcoder_url: Optional[str] = constants.TRANSCODER_URL
    transcoder_token: Optional[str] = constants.TRANSCODER_TOKEN
    movies: int = constants.DEFAULT_MOVIE_COUNT
    # Raw value from --timeout or TRIAGE_TIMEOUT; validate() turns it into seconds
    timeout: Union[float, str, None] = None
    dry_run: bool = False
    debug: bool = False

    def validate(self) -> "TriageConfig":
        """
        Check required options, naming every missing one in a single error.

        The transcoder URL and token are only required when jobs will actually
        be submitted.
        """
        required = {
            "--api-key / RADARR_API_KEY": self.radarr_api_key,
            "--url / RADARR_URL": self.radarr_url,
        }
        if not self.dry_run:
            required["--transcoder-url / TRANSCODER_URL"] = self.transcoder_url
            required["--transcoder-token / TRANSCODER_TOKEN"] = self.transcoder_token

        missing = [name for name, value in required.items() if not value]
        if missing:
            raise ConfigurationError(f"Missing required options: {', '.join(missing)}")
        if self.movies < 0:
            raise ConfigurationError(f"--movies must not be negative, got {self.movies}")
        if self.timeout is None:
            self.timeout = constants.TRIAGE_TIMEOUT or constants.REQUEST_TIMEOUT
        try:
            self.timeout = float(self.timeout)
        except (TypeError, ValueError) as e:
            raise ConfigurationError(
                f"--timeout / TRIAGE_TIMEOUT must be a number of seconds, got {self.timeout!r}"
            ) from e
        if self.timeout <= 0:
            raise ConfigurationError(f"--timeout must be positive, got {self.timeout}")
        return self
