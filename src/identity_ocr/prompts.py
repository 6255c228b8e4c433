"""
Prompt templates for identity document extraction.
"""

from types import MappingProxyType
from typing import Mapping, Optional, Tuple, Union

from .models import ProfessionType


SYSTEM_PROMPT = "You are a helpful assistant that analyzes images and outputs information with JSON format."


NAME_PROMPT = """
這是一張參加證、識別證、執照、證書、或名片，請判斷其中的中文姓名，並以以下 JSON 格式輸出：
{
  "name": "中文姓名"
}
如果找不到中文姓名，請將 "name" 的值設為空字串。
"""


APEN_INFO_PROMPT = """
請分析這張圖片（可能是醫師的識別證、執照、證書或名片），並提取以下資訊：

**需要辨識的欄位：**

1. **name（姓名）**: 中文姓名
2. **birthday（生日）**: 格式為 YYYY-MM-DD
3. **department（科別）**: 中文科別名稱
4. **facility（執業場所）**: 任職場所或執業場所
   - 注意：學生不需要填寫此欄位
5. **position（職級）**: 醫師職級，僅限以下三種：
   - "PGY" - 不分科醫師
   - "Resident" - 住院醫師
   - "VS" - 主治醫師（專科證書必定為 VS）
   - 如果只標註「醫師」而無具體職級，或為學生則不填
6. **valid_date（醫師證書生效日期）**: 格式為 YYYY-MM-DD
   - 僅當圖片為「醫師證書」時才需辨識
   - 執業執照不需要填寫此欄位
7. **specialty_valid_date（專科證書生效日期）**: 格式為 YYYY-MM-DD
   - 僅當圖片為「專科證書」時才需辨識
   - 注意：這是「生效日期」或「頒發日期」，不是「有效日期」

**輸出格式：**
請以以下 JSON 格式輸出（如果找不到對應資料或無法辨識，請將該欄位的值設為 null）：

{
  "name": "中文姓名",
  "birthday": "YYYY-MM-DD",
  "position": "PGY、Resident 或 VS",
  "department": "科別",
  "facility": "執業場所/任職場所",
  "valid_date": "YYYY-MM-DD",
  "specialty_valid_date": "YYYY-MM-DD"
}
"""


NURSE_INFO_PROMPT = """
請分析這張圖片（可能是護理師的識別證、執照、證書或名片），並提取以下資訊：

**需要辨識的欄位：**

1. **name（姓名）**: 中文姓名
2. **birthday（生日）**: 格式為 YYYY-MM-DD
3. **department（科別）**: 中文科別名稱
4. **facility（執業場所）**: 任職場所或執業場所
   - 注意：學生不需要填寫此欄位
5. **valid_date（護理師證書生效日期）**: 格式為 YYYY-MM-DD
   - 僅當圖片為「護理師證書」時才需辨識
   - 執業執照不需要填寫此欄位

**輸出格式：**
請以以下 JSON 格式輸出（如果找不到對應資料或無法辨識，請將該欄位的值設為 null）：

{
  "name": "中文姓名",
  "birthday": "YYYY-MM-DD",
  "department": "科別",
  "facility": "執業場所/任職場所",
  "valid_date": "YYYY-MM-DD"
}
"""


PHARMACIST_INFO_PROMPT = """
請分析這張圖片（可能是藥師的識別證、執照、證書或名片），並提取以下資訊：

**需要辨識的欄位：**

1. **name（姓名）**: 中文姓名
2. **birthday（生日）**: 格式為 YYYY-MM-DD
3. **facility（執業場所）**: 任職場所或執業場所
   - 注意：學生不需要填寫此欄位
4. **valid_date（藥師證書生效日期）**: 格式為 YYYY-MM-DD
   - 僅當圖片為「藥師證書」時才需辨識
   - 執業執照不需要填寫此欄位

**輸出格式：**
請以以下 JSON 格式輸出（如果找不到對應資料或無法辨識，請將該欄位的值設為 null）：

{
  "name": "中文姓名",
  "birthday": "YYYY-MM-DD",
  "facility": "執業場所/任職場所",
  "valid_date": "YYYY-MM-DD"
}
"""


INFO_PROMPTS: Mapping[ProfessionType, str] = MappingProxyType({
    ProfessionType.APEN: APEN_INFO_PROMPT,
    ProfessionType.NURSE: NURSE_INFO_PROMPT,
    ProfessionType.PHARMACIST: PHARMACIST_INFO_PROMPT,
})


# Reply keys each prompt asks the model for
INFO_FIELDS: Mapping[ProfessionType, Tuple[str, ...]] = MappingProxyType({
    ProfessionType.APEN: (
        "name", "birthday", "position", "department", "facility",
        "valid_date", "specialty_valid_date",
    ),
    ProfessionType.NURSE: ("name", "birthday", "department", "facility", "valid_date"),
    ProfessionType.PHARMACIST: ("name", "birthday", "facility", "valid_date"),
})


def resolve_profession(profession: Optional[Union[ProfessionType, str]]) -> ProfessionType:
    """
    Map a profession value onto a known profession type.

    Unknown, empty or missing values resolve to apen (physician).

    Args:
        profession: ProfessionType member or its string value

    Returns:
        The matching ProfessionType, or ProfessionType.APEN
    """
    try:
        return ProfessionType(profession)
    except ValueError:
        return ProfessionType.APEN


def get_info_prompt(profession: Optional[Union[ProfessionType, str]]) -> str:
    """
    Select the extraction prompt for a profession.

    Args:
        profession: ProfessionType member or its string value

    Returns:
        Prompt text; the apen prompt for unknown professions
    """
    return INFO_PROMPTS[resolve_profession(profession)]
