"""
胜负帮助表
Outcome Help Table
"""
from typing import List
from tabulate import tabulate
from .game_logic import MoveSet, build_verdict_matrix

CORNER_LABEL = "PC \\ User >"


def build_outcome_table(move_set: MoveSet) -> List[List[str]]:
    """
    构建胜负表（玩家视角）

    第一行为表头，之后每行对应一个电脑招式，每列对应一个玩家招式，
    单元格为玩家的结果。

    Args:
        move_set: 招式集合

    Returns:
        List[List[str]]: 表头行 + N 行数据
    """
    matrix = build_verdict_matrix(move_set)
    table = [[CORNER_LABEL, *move_set.moves]]
    for computer_move, verdicts in zip(move_set.moves, matrix):
        table.append([computer_move, *(verdict.value for verdict in verdicts)])
    return table


def render_outcome_table(move_set: MoveSet, table_format: str = "grid") -> str:
    """
    渲染胜负表文本

    Args:
        move_set: 招式集合
        table_format: tabulate 表格格式名称

    Returns:
        str: 表格文本
    """
    header, *rows = build_outcome_table(move_set)
    intro = (
        "Results are shown from your (User) point of view:\n"
        "rows are the computer's move, columns are your move.\n"
    )
    return intro + tabulate(rows, headers=header, tablefmt=table_format)
