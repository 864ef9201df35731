from pydantic import BaseModel, ConfigDict, Field, field_validator
from typing import Any, Dict, Optional


class TaskPayload(BaseModel):
    task: Optional[str] = None
    user_prompt: Optional[str] = Field(None, alias="userPrompt")
    # 仅 generic 任务使用
    system_prompt: Optional[str] = Field(None, alias="systemPrompt")
    model_config = ConfigDict(populate_by_name=True, extra="ignore")

    @field_validator("task", "user_prompt", "system_prompt", mode="before")
    @classmethod
    def _coerce_scalar_to_str(cls, value: Any) -> Any:
        # 前端偶尔会传数字/布尔值，统一转成字符串；对象/数组交给 pydantic 报错
        if isinstance(value, bool):
            return "true" if value else "false"
        if isinstance(value, (int, float)):
            return str(value)
        return value


class TaskEvent(BaseModel):
    # 缺失的方法按非 POST 处理（例如 API Gateway v2 事件没有 httpMethod）
    http_method: str = Field("", alias="httpMethod")
    path: str = ""
    body: Optional[str] = None
    is_base64_encoded: bool = Field(False, alias="isBase64Encoded")
    model_config = ConfigDict(populate_by_name=True, extra="ignore")

    @field_validator("http_method", "path", mode="before")
    @classmethod
    def _none_to_empty(cls, value: Any) -> Any:
        return "" if value is None else value

    @field_validator("is_base64_encoded", mode="before")
    @classmethod
    def _none_to_false(cls, value: Any) -> Any:
        return False if value is None else value


class TaskResponse(BaseModel):
    status_code: int = Field(alias="statusCode")
    headers: Dict[str, str] = Field(default_factory=dict)
    body: str = ""
    model_config = ConfigDict(populate_by_name=True, frozen=True)

    def to_event_dict(self) -> Dict[str, Any]:
        return self.model_dump(by_alias=True)
