from typing import Dict, Optional, Union

from pydantic import BaseModel

SettingValue = Optional[Union[bool, int, float, str]]


class SettingsUpdateRequest(BaseModel):
    settings: Dict[str, SettingValue]
