# scripts/smoke_rank.py
import argparse
import logging

from graficahub.domain.ranking import ranked
from graficahub.service_layer.demo_seed import DEMO_PEDIDO_ID, demo_proposals
from graficahub.service_layer.ranking import rank_order


def main():
    ap = argparse.ArgumentParser(description="Rank the demo proposals and print the comparison.")
    ap.add_argument("--pedido", default=DEMO_PEDIDO_ID)
    ap.add_argument("-v", "--verbose", action="store_true")
    args = ap.parse_args()

    logging.basicConfig(level=logging.DEBUG if args.verbose else logging.INFO, format="%(levelname)s:%(name)s:%(message)s")

    result = rank_order(args.pedido, demo_proposals(args.pedido))
    if not result.ok:
        print("no valid proposals to compare:", result.error)
        return

    ctx = result.context
    print(f"preco_medio={ctx.preco_medio:.2f} preco_medio_por_m2={ctx.preco_medio_por_m2} menor_distancia={ctx.menor_distancia}")
    for s in ranked(result):
        badges = ", ".join(sorted(b.label for b in s.badges))
        print(
            s.id,
            f"score={s.score:.3f}",
            f"preco={s.proposal.preco_total:.2f}",
            s.preco_status.value,
            f"{s.preco_percentual_vs_media:+.1f}%",
            badges,
        )


if __name__ == "__main__":
    main()
