"""
JSON export for PingRunner
"""

import json
from datetime import datetime
from pathlib import Path
from typing import Iterable, Optional

from ..models import PingResponse
from .. import __version__


class JsonExporter:
    """
    Export collected responses to JSON.
    
    Raw stdout/stderr are kept so a failed parse can be inspected later.
    """
    
    def __init__(self, include_raw: bool = True):
        self.include_raw = include_raw
    
    def export(self, target: str, command: str, responses: Iterable[PingResponse],
               output_path: Optional[Path] = None) -> dict:
        """
        Export responses to JSON.
        
        Args:
            target: Destination as given by the user
            command: Argument string that was run
            responses: Responses in delivery order
            output_path: Optional file path to write
        
        Returns:
            JSON-serializable dict
        """
        responses = list(responses)
        succeeded = [r for r in responses if r.success]
        
        data = {
            "meta": {
                "version": __version__,
                "generator": "PingRunner",
                "generated_at": datetime.now().isoformat()
            },
            "target": target,
            "command": command,
            "probes": [self._serialize_response(r) for r in responses],
            "summary": {
                "sent": len(responses),
                "succeeded": len(succeeded),
                "avg_time_ms": (
                    round(sum(r.duration for r in succeeded) / len(succeeded), 3)
                    if succeeded else None
                )
            }
        }
        
        if output_path:
            self._write_file(data, output_path)
        
        return data
    
    def _serialize_response(self, response: PingResponse) -> dict:
        data = response.to_dict()
        if not self.include_raw:
            data.pop("stdout")
            data.pop("stderr")
        return data
    
    def _write_file(self, data: dict, path: Path):
        """Write JSON to file"""
        path = Path(path)
        path.parent.mkdir(parents=True, exist_ok=True)
        
        with open(path, 'w', encoding='utf-8') as f:
            json.dump(data, f, indent=2, ensure_ascii=False)
