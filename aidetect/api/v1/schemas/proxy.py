from pydantic import BaseModel, ConfigDict, Field


class ProxyRequest(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    system_prompt: str = Field(alias="systemPrompt")
    user_prompt: str = Field(alias="userPrompt")
